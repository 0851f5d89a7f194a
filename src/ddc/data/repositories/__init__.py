"""Repository exports."""

from .enemies_repo import EnemiesRepository
from .heroes_repo import HeroesRepository
from .rules_repo import RulesRepository

__all__ = [
    "EnemiesRepository",
    "HeroesRepository",
    "RulesRepository",
]
