"""Combat actions a hero can take on their turn.

Each action implements ``apply(context) -> events``; ``ACTION_REGISTRY`` maps the
fixed menu enumeration to its implementation.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Protocol

from ddc.core.rng import RNG
from ddc.domain.defs import EncounterRules
from ddc.domain.entities import Enemy, Hero
from ddc.domain.party import Party
from ddc.services.events import (
    DungeonEvent,
    GuardRaisedEvent,
    StressRelievedEvent,
    StrikeResolvedEvent,
)


class CombatActionId(Enum):
    STRIKE = "strike"
    GUARD = "guard"
    CALM = "calm"


@dataclass(slots=True)
class ActionContext:
    hero: Hero
    party: Party
    enemy: Enemy
    rng: RNG
    rules: EncounterRules


class CombatAction(Protocol):
    action_id: CombatActionId
    label: str

    def apply(self, context: ActionContext) -> List[DungeonEvent]:
        ...


class StrikeAction:
    action_id = CombatActionId.STRIKE
    label = "Strike"

    def apply(self, context: ActionContext) -> List[DungeonEvent]:
        strike = context.rules.strike
        base = context.hero.attack + context.rng.roll(strike.variance)
        is_critical = context.rng.chance(strike.crit_chance)
        raw = base * strike.crit_multiplier if is_critical else base
        damage = context.enemy.receive_damage(raw)
        return [
            StrikeResolvedEvent(
                hero_id=context.hero.id,
                hero_name=context.hero.name,
                target_name=context.enemy.name,
                damage=damage,
                is_critical=is_critical,
                target_hp=context.enemy.hp,
            )
        ]


class GuardAction:
    action_id = CombatActionId.GUARD
    label = "Guard"

    def apply(self, context: ActionContext) -> List[DungeonEvent]:
        # the combat service restores the pre-turn defense once the turn ends
        bonus = context.rules.guard_bonus
        context.hero.defense += bonus
        return [GuardRaisedEvent(hero_id=context.hero.id, hero_name=context.hero.name, amount=bonus)]


class CalmAction:
    action_id = CombatActionId.CALM
    label = "Steady Nerves"

    def apply(self, context: ActionContext) -> List[DungeonEvent]:
        amount = context.rng.roll(context.rules.calm)
        context.hero.calm(amount)
        return [
            StressRelievedEvent(
                hero_id=context.hero.id,
                hero_name=context.hero.name,
                amount=amount,
                stress=context.hero.stress,
            )
        ]


ACTION_REGISTRY: Dict[CombatActionId, CombatAction] = {
    CombatActionId.STRIKE: StrikeAction(),
    CombatActionId.GUARD: GuardAction(),
    CombatActionId.CALM: CalmAction(),
}


def get_action(action_id: CombatActionId) -> CombatAction:
    return ACTION_REGISTRY[action_id]


def available_actions() -> List[CombatAction]:
    """Actions in menu order."""
    return [ACTION_REGISTRY[action_id] for action_id in CombatActionId]
