"""Factory for creating enemy instances from definitions."""
from __future__ import annotations

from ddc.core.rng import RNG
from ddc.data.errors import DataReferenceError
from ddc.data.repositories import EnemiesRepository
from ddc.domain.defs import EnemyDef
from ddc.domain.entities import Enemy
from ddc.services.errors import FactoryError

from .id_factory import make_instance_id


def create_enemy_instance(enemy_def: EnemyDef, rng: RNG) -> Enemy:
    """Roll hp and attack inside the definition's ranges."""
    hp = rng.roll(enemy_def.hp_range)
    attack = rng.roll(enemy_def.attack_range)
    if hp <= 0:
        raise FactoryError(f"Enemy '{enemy_def.id}' rolled non-positive hp {hp}.")
    return Enemy(
        id=make_instance_id("enemy", rng),
        enemy_id=enemy_def.id,
        name=enemy_def.name,
        max_hp=hp,
        hp=hp,
        attack=attack,
        is_boss=enemy_def.is_boss,
    )


def create_random_enemy(enemies_repo: EnemiesRepository, rng: RNG) -> Enemy:
    """Pick a regular foe uniformly and instantiate it."""
    try:
        candidates = enemies_repo.regular()
    except DataReferenceError as exc:
        raise FactoryError("No regular enemies are available.") from exc
    return create_enemy_instance(rng.choice(candidates), rng)


def create_boss(enemies_repo: EnemiesRepository, rng: RNG) -> Enemy:
    try:
        boss_def = enemies_repo.boss()
    except DataReferenceError as exc:
        raise FactoryError("The dungeon has no boss.") from exc
    return create_enemy_instance(boss_def, rng)
