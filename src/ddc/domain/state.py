"""Session context that replaces module-level game globals."""
from __future__ import annotations

from dataclasses import dataclass, field

from ddc.core.rng import RNG
from ddc.core.types import Phase
from ddc.domain.defs import EncounterRules
from ddc.domain.entities import Enemy
from ddc.domain.party import DungeonProgress, Party


@dataclass
class SessionState:
    """Everything one run of the dungeon mutates."""

    seed: int
    rng: RNG
    party: Party
    dungeon: DungeonProgress
    boss: Enemy
    rules: EncounterRules = field(default_factory=EncounterRules)
    phase: Phase = "exploring"
