"""Event records emitted by the dungeon services for the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ddc.core.types import EncounterKind, Victor


@dataclass(slots=True)
class DungeonEvent:
    """Base dungeon event."""


# Combat


@dataclass(slots=True)
class EncounterStartedEvent(DungeonEvent):
    encounter_id: str
    kind: EncounterKind
    enemy_name: str
    enemy_hp: int


@dataclass(slots=True)
class HeroTurnEvent(DungeonEvent):
    hero_id: str
    hero_name: str
    enemy_name: str
    enemy_hp: int
    round_number: int


@dataclass(slots=True)
class StrikeResolvedEvent(DungeonEvent):
    hero_id: str
    hero_name: str
    target_name: str
    damage: int
    is_critical: bool
    target_hp: int


@dataclass(slots=True)
class GuardRaisedEvent(DungeonEvent):
    hero_id: str
    hero_name: str
    amount: int


@dataclass(slots=True)
class StressRelievedEvent(DungeonEvent):
    hero_id: str
    hero_name: str
    amount: int
    stress: int


@dataclass(slots=True)
class EnemyAttackEvent(DungeonEvent):
    enemy_name: str
    target_id: str
    target_name: str
    damage: int
    stress_gained: int
    target_hp: int
    is_boss: bool = False


@dataclass(slots=True)
class DreadEvent(DungeonEvent):
    """Ambient stress applied to every living hero during a boss round."""

    amount: int


@dataclass(slots=True)
class PanicEvent(DungeonEvent):
    hero_id: str
    hero_name: str
    damage: int
    hero_hp: int


@dataclass(slots=True)
class HeroFallenEvent(DungeonEvent):
    hero_id: str
    hero_name: str


@dataclass(slots=True)
class EnemyDefeatedEvent(DungeonEvent):
    enemy_name: str
    is_boss: bool


@dataclass(slots=True)
class VictoryRestEvent(DungeonEvent):
    amount: int


@dataclass(slots=True)
class EncounterEndedEvent(DungeonEvent):
    victor: Victor


@dataclass(slots=True)
class BossLockedEvent(DungeonEvent):
    relics: int
    relics_required: int


# Exploration


@dataclass(slots=True)
class RelicFoundEvent(DungeonEvent):
    relics: int
    relics_required: int
    hero_name: str | None
    stress_gained: int


@dataclass(slots=True)
class TrapTriggeredEvent(DungeonEvent):
    hero_id: str
    hero_name: str
    damage: int
    stress_gained: int


@dataclass(slots=True)
class BaseDamagedEvent(DungeonEvent):
    reason: str


@dataclass(slots=True)
class QuietCorridorEvent(DungeonEvent):
    """A minor encounter with no consequences."""


@dataclass(slots=True)
class TensionEvent(DungeonEvent):
    hero_id: str
    hero_name: str
    stress_gained: int


@dataclass(slots=True)
class AmbushEvent(DungeonEvent):
    """Exploring drew the attention of a foe."""


@dataclass(slots=True)
class BaseRepairedEvent(DungeonEvent):
    already_functional: bool


@dataclass(slots=True)
class PartyRestedEvent(DungeonEvent):
    recovered: List[Tuple[str, int, int]]  # (hero name, hp healed, stress calmed)


# Session


@dataclass(slots=True)
class SessionWonEvent(DungeonEvent):
    boss_name: str


@dataclass(slots=True)
class SessionLostEvent(DungeonEvent):
    """The whole party has fallen."""
