"""Domain definition exports."""

from .enemy_def import EnemyDef
from .hero_def import HeroDef
from .rules_def import CombatProfile, EncounterRules, ExplorationRules, RestRules, StrikeRules

__all__ = [
    "CombatProfile",
    "EncounterRules",
    "EnemyDef",
    "ExplorationRules",
    "HeroDef",
    "RestRules",
    "StrikeRules",
]
