"""UI-agnostic controllers for game flow orchestration."""
from __future__ import annotations

from .encounter_controller import DungeonActionId, DungeonActionResult, EncounterController

__all__ = [
    "DungeonActionId",
    "DungeonActionResult",
    "EncounterController",
]
