"""Numeric tuning for combat, exploration and resting."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

Range = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class CombatProfile:
    """Enemy-side behaviour that differs between regular and boss fights."""

    retaliation_variance: Range
    retaliation_stress: Range
    panic_chance: float
    panic_damage: Range
    round_stress: int = 0


@dataclass(frozen=True, slots=True)
class StrikeRules:
    variance: Range = (-2, 3)
    crit_chance: float = 0.15
    crit_multiplier: int = 2


@dataclass(frozen=True, slots=True)
class ExplorationRules:
    """Thresholds partition a single 1..100 roll into four outcomes."""

    roll_range: Range = (1, 100)
    relic_max: int = 45
    trap_max: int = 75
    event_max: int = 90
    relic_stress: Range = (3, 8)
    trap_damage: Range = (3, 7)
    trap_stress: Range = (8, 15)
    base_break_chance: float = 0.3
    tension_stress: Range = (10, 18)
    ambush_chance: float = 0.35


@dataclass(frozen=True, slots=True)
class RestRules:
    heal: Range = (2, 5)
    calm: Range = (6, 12)
    incident_chance: float = 0.2


def _regular_profile() -> CombatProfile:
    return CombatProfile(
        retaliation_variance=(-2, 3),
        retaliation_stress=(3, 9),
        panic_chance=0.25,
        panic_damage=(3, 8),
    )


def _boss_profile() -> CombatProfile:
    return CombatProfile(
        retaliation_variance=(0, 4),
        retaliation_stress=(7, 14),
        panic_chance=0.3,
        panic_damage=(4, 10),
        round_stress=2,
    )


@dataclass(frozen=True, slots=True)
class EncounterRules:
    """Every constant the encounter loop reads; overridden from rules.json."""

    strike: StrikeRules = field(default_factory=StrikeRules)
    guard_bonus: int = 3
    calm: Range = (8, 15)
    regular: CombatProfile = field(default_factory=_regular_profile)
    boss: CombatProfile = field(default_factory=_boss_profile)
    panic_threshold: int = 100
    exploration: ExplorationRules = field(default_factory=ExplorationRules)
    rest: RestRules = field(default_factory=RestRules)
    victory_heal: Range = (3, 7)
    relics_required: int = 4

    def profile_for(self, kind: str) -> CombatProfile:
        return self.boss if kind == "boss" else self.regular
