"""Party and dungeon progress models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ddc.core.rng import RNG
from ddc.domain.entities import Hero


@dataclass(slots=True)
class Party:
    """Ordered heroes with fixed membership for the whole session."""

    heroes: List[Hero]

    @property
    def alive_heroes(self) -> List[Hero]:
        return [hero for hero in self.heroes if hero.is_alive]

    @property
    def all_dead(self) -> bool:
        return not self.alive_heroes

    def random_alive(self, rng: RNG) -> Hero | None:
        alive = self.alive_heroes
        if not alive:
            return None
        return alive[rng.randint(0, len(alive) - 1)]

    def get(self, hero_id: str) -> Hero:
        for hero in self.heroes:
            if hero.id == hero_id:
                return hero
        raise KeyError(hero_id)


@dataclass(slots=True)
class DungeonProgress:
    """Relic collection and the state of the base camp."""

    relics_required: int
    relics: int = 0
    base_functional: bool = True

    @property
    def ready_for_boss(self) -> bool:
        return self.relics >= self.relics_required
