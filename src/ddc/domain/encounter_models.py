"""Encounter domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ddc.core.types import EncounterKind, Victor
from ddc.domain.entities import Enemy


@dataclass(slots=True)
class EncounterState:
    """Tracks one fight; discarded once it ends."""

    encounter_id: str
    kind: EncounterKind
    enemy: Enemy
    round_queue: List[str] = field(default_factory=list)
    current_hero_id: str | None = None
    round_number: int = 0
    is_over: bool = False
    victor: Victor | None = None


@dataclass(slots=True)
class HeroStatusView:
    """Rendering snapshot of a single hero."""

    hero_id: str
    name: str
    hp: int
    max_hp: int
    stress: int
    is_alive: bool


@dataclass(slots=True)
class SessionView:
    """Rendering snapshot for the status panel."""

    heroes: List[HeroStatusView]
    relics: int
    relics_required: int
    base_functional: bool
    phase: str
