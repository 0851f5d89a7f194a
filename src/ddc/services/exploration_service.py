"""Exploration, base repair and resting between fights."""
from __future__ import annotations

from typing import List, Tuple

from ddc.domain.state import SessionState
from ddc.services.errors import EncounterError
from ddc.services.events import (
    BaseDamagedEvent,
    BaseRepairedEvent,
    DungeonEvent,
    PartyRestedEvent,
    QuietCorridorEvent,
    RelicFoundEvent,
    TensionEvent,
    TrapTriggeredEvent,
)


class ExplorationService:
    """Applies the out-of-combat dungeon actions to a session."""

    def explore(self, session: SessionState) -> List[DungeonEvent]:
        """Roll once and fire exactly one of: relic, trap, minor event, tension."""
        self._require_exploring(session)
        rules = session.rules.exploration
        rng = session.rng
        party = session.party
        dungeon = session.dungeon

        roll = rng.roll(rules.roll_range)
        if roll <= rules.relic_max:
            dungeon.relics += 1
            hero = party.random_alive(rng)
            stress = 0
            if hero is not None:
                stress = rng.roll(rules.relic_stress)
                hero.add_stress(stress)
            return [
                RelicFoundEvent(
                    relics=dungeon.relics,
                    relics_required=dungeon.relics_required,
                    hero_name=hero.name if hero else None,
                    stress_gained=stress,
                )
            ]

        if roll <= rules.trap_max:
            hero = party.random_alive(rng)
            if hero is None:
                return []
            damage = hero.receive_damage(rng.roll(rules.trap_damage))
            stress = rng.roll(rules.trap_stress)
            hero.add_stress(stress)
            return [TrapTriggeredEvent(hero_id=hero.id, hero_name=hero.name, damage=damage, stress_gained=stress)]

        if roll <= rules.event_max:
            if rng.chance(rules.base_break_chance):
                dungeon.base_functional = False
                return [BaseDamagedEvent(reason="collapse")]
            return [QuietCorridorEvent()]

        hero = party.random_alive(rng)
        if hero is None:
            return []
        stress = rng.roll(rules.tension_stress)
        hero.add_stress(stress)
        return [TensionEvent(hero_id=hero.id, hero_name=hero.name, stress_gained=stress)]

    def should_ambush(self, session: SessionState) -> bool:
        """Whether a fight follows an exploration step."""
        if session.phase != "exploring" or session.party.all_dead:
            return False
        return session.rng.chance(session.rules.exploration.ambush_chance)

    def repair_base(self, session: SessionState) -> List[DungeonEvent]:
        self._require_exploring(session)
        if session.dungeon.base_functional:
            return [BaseRepairedEvent(already_functional=True)]
        session.dungeon.base_functional = True
        return [BaseRepairedEvent(already_functional=False)]

    def rest(self, session: SessionState) -> List[DungeonEvent]:
        """Heal and calm every living hero; camp incidents may break the base."""
        self._require_exploring(session)
        rules = session.rules.rest
        rng = session.rng
        recovered: List[Tuple[str, int, int]] = []
        for hero in session.party.alive_heroes:
            hp_before = hero.hp
            stress_before = hero.stress
            hero.heal(rng.roll(rules.heal))
            hero.calm(rng.roll(rules.calm))
            recovered.append((hero.name, hero.hp - hp_before, stress_before - hero.stress))
        events: List[DungeonEvent] = [PartyRestedEvent(recovered=recovered)]
        if rng.chance(rules.incident_chance):
            session.dungeon.base_functional = False
            events.append(BaseDamagedEvent(reason="incident"))
        return events

    def _require_exploring(self, session: SessionState) -> None:
        if session.phase != "exploring":
            raise EncounterError(f"Dungeon actions are unavailable while {session.phase}.")
