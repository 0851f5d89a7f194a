"""Factory for building the starting party."""
from __future__ import annotations

from typing import List

from ddc.data.repositories import HeroesRepository
from ddc.domain.defs import HeroDef
from ddc.domain.entities import Hero
from ddc.domain.party import Party
from ddc.services.errors import FactoryError


def create_hero(hero_def: HeroDef) -> Hero:
    return Hero(
        id=hero_def.id,
        name=hero_def.name,
        max_hp=hero_def.max_hp,
        hp=hero_def.max_hp,
        attack=hero_def.attack,
        defense=hero_def.defense,
    )


def create_party(heroes_repo: HeroesRepository) -> Party:
    """Instantiate every roster entry at full health and zero stress."""
    heroes: List[Hero] = [create_hero(hero_def) for hero_def in heroes_repo.roster()]
    if not heroes:
        raise FactoryError("Cannot start a run with an empty roster.")
    return Party(heroes=heroes)
