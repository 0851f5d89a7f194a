"""Factory helpers for runtime entities."""

from .enemy_factory import create_boss, create_enemy_instance, create_random_enemy
from .id_factory import make_instance_id
from .party_factory import create_hero, create_party

__all__ = [
    "create_boss",
    "create_enemy_instance",
    "create_hero",
    "create_party",
    "create_random_enemy",
    "make_instance_id",
]
