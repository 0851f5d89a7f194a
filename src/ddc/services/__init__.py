"""Service layer exports."""

from .actions import ACTION_REGISTRY, CombatActionId, available_actions, get_action
from .blackjack_service import BlackjackService
from .combat_service import CombatService
from .controllers import DungeonActionId, DungeonActionResult, EncounterController
from .errors import EncounterError, FactoryError, TableError
from .exploration_service import ExplorationService
from .session_service import SessionService

__all__ = [
    "ACTION_REGISTRY",
    "BlackjackService",
    "CombatActionId",
    "CombatService",
    "DungeonActionId",
    "DungeonActionResult",
    "EncounterController",
    "EncounterError",
    "ExplorationService",
    "FactoryError",
    "SessionService",
    "TableError",
    "available_actions",
    "get_action",
]
