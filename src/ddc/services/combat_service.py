"""Combat service resolving regular and boss encounters turn by turn."""
from __future__ import annotations

from typing import List, Tuple

from ddc.data.repositories import EnemiesRepository
from ddc.domain.encounter_models import EncounterState
from ddc.domain.entities import Hero
from ddc.domain.state import SessionState
from ddc.services.actions import ActionContext, CombatActionId, get_action
from ddc.services.errors import EncounterError
from ddc.services.events import (
    BossLockedEvent,
    DreadEvent,
    DungeonEvent,
    EncounterEndedEvent,
    EncounterStartedEvent,
    EnemyAttackEvent,
    EnemyDefeatedEvent,
    HeroFallenEvent,
    HeroTurnEvent,
    PanicEvent,
    SessionLostEvent,
    SessionWonEvent,
    VictoryRestEvent,
)
from ddc.services.factories import create_random_enemy, make_instance_id


class CombatService:
    """Runs encounters against a session's party.

    Regular fights let one random living hero act per round. Boss fights let
    every living hero act in party order each round, so they last longer and
    hurt more.
    """

    def __init__(self, enemies_repo: EnemiesRepository) -> None:
        self._enemies_repo = enemies_repo

    # -----------------------
    # Encounter Lifecycle
    # -----------------------
    def start_encounter(self, session: SessionState) -> Tuple[EncounterState, List[DungeonEvent]]:
        """Spawn a regular foe and move the session into combat."""
        self._require_exploring(session)
        enemy = create_random_enemy(self._enemies_repo, session.rng)
        encounter = EncounterState(
            encounter_id=make_instance_id("encounter", session.rng),
            kind="regular",
            enemy=enemy,
        )
        session.phase = "in_combat"
        return encounter, [
            EncounterStartedEvent(
                encounter_id=encounter.encounter_id,
                kind="regular",
                enemy_name=enemy.name,
                enemy_hp=enemy.hp,
            )
        ]

    def start_boss_encounter(
        self, session: SessionState
    ) -> Tuple[EncounterState | None, List[DungeonEvent]]:
        """Face the boss, or return a BossLockedEvent without touching state."""
        self._require_exploring(session)
        dungeon = session.dungeon
        if not dungeon.ready_for_boss:
            return None, [BossLockedEvent(relics=dungeon.relics, relics_required=dungeon.relics_required)]
        if not session.boss.is_alive:
            raise EncounterError("The boss has already been defeated.")
        encounter = EncounterState(
            encounter_id=make_instance_id("boss", session.rng),
            kind="boss",
            enemy=session.boss,
        )
        session.phase = "boss_combat"
        return encounter, [
            EncounterStartedEvent(
                encounter_id=encounter.encounter_id,
                kind="boss",
                enemy_name=session.boss.name,
                enemy_hp=session.boss.hp,
            )
        ]

    # -----------------------
    # Turns
    # -----------------------
    def begin_turn(self, encounter: EncounterState, session: SessionState) -> Tuple[Hero | None, List[DungeonEvent]]:
        """Select the hero who acts next and record it on the encounter."""
        if encounter.is_over:
            return None, []
        if encounter.kind == "boss":
            hero = self._next_boss_hero(encounter, session)
        else:
            hero = session.party.random_alive(session.rng)
            if hero is not None:
                encounter.round_number += 1
        encounter.current_hero_id = hero.id if hero else None
        if hero is None:
            return None, []
        return hero, [
            HeroTurnEvent(
                hero_id=hero.id,
                hero_name=hero.name,
                enemy_name=encounter.enemy.name,
                enemy_hp=encounter.enemy.hp,
                round_number=encounter.round_number,
            )
        ]

    def resolve_turn(
        self, encounter: EncounterState, session: SessionState, action_id: CombatActionId
    ) -> List[DungeonEvent]:
        """Apply the acting hero's choice, the enemy's answer and end-of-turn effects."""
        hero = self._require_acting_hero(encounter, session)
        enemy = encounter.enemy
        profile = session.rules.profile_for(encounter.kind)
        rng = session.rng
        alive_before = {h.id for h in session.party.alive_heroes}

        pre_turn_defense = hero.defense
        context = ActionContext(hero=hero, party=session.party, enemy=enemy, rng=rng, rules=session.rules)
        events: List[DungeonEvent] = list(get_action(action_id).apply(context))

        if enemy.is_alive:
            target = session.party.random_alive(rng)
            if target is not None:
                raw = enemy.attack + rng.roll(profile.retaliation_variance)
                damage = target.receive_damage(raw)
                stress = rng.roll(profile.retaliation_stress)
                target.add_stress(stress)
                events.append(
                    EnemyAttackEvent(
                        enemy_name=enemy.name,
                        target_id=target.id,
                        target_name=target.name,
                        damage=damage,
                        stress_gained=stress,
                        target_hp=target.hp,
                        is_boss=enemy.is_boss,
                    )
                )
        else:
            events.append(EnemyDefeatedEvent(enemy_name=enemy.name, is_boss=enemy.is_boss))

        hero.defense = pre_turn_defense

        if profile.round_stress:
            for living in session.party.alive_heroes:
                living.add_stress(profile.round_stress)
            events.append(DreadEvent(amount=profile.round_stress))

        for living in session.party.alive_heroes:
            if living.stress >= session.rules.panic_threshold and rng.chance(profile.panic_chance):
                damage = living.lose_hp(rng.roll(profile.panic_damage))
                events.append(
                    PanicEvent(hero_id=living.id, hero_name=living.name, damage=damage, hero_hp=living.hp)
                )

        for fallen in session.party.heroes:
            if fallen.id in alive_before and not fallen.is_alive:
                events.append(HeroFallenEvent(hero_id=fallen.id, hero_name=fallen.name))

        encounter.current_hero_id = None
        events.extend(self._update_outcome(encounter, session))
        return events

    # -----------------------
    # Helpers
    # -----------------------
    def _require_exploring(self, session: SessionState) -> None:
        if session.phase != "exploring":
            raise EncounterError(f"Cannot start an encounter while {session.phase}.")

    def _require_acting_hero(self, encounter: EncounterState, session: SessionState) -> Hero:
        if encounter.is_over:
            raise EncounterError(f"Encounter '{encounter.encounter_id}' is already over.")
        if encounter.current_hero_id is None:
            raise EncounterError("No hero is acting; call begin_turn first.")
        hero = session.party.get(encounter.current_hero_id)
        if not hero.is_alive:
            raise EncounterError(f"{hero.name} cannot act while incapacitated.")
        return hero

    def _next_boss_hero(self, encounter: EncounterState, session: SessionState) -> Hero | None:
        while True:
            while encounter.round_queue:
                hero = session.party.get(encounter.round_queue.pop(0))
                if hero.is_alive:
                    return hero
            alive = session.party.alive_heroes
            if not alive:
                return None
            encounter.round_queue = [hero.id for hero in alive]
            encounter.round_number += 1

    def _update_outcome(self, encounter: EncounterState, session: SessionState) -> List[DungeonEvent]:
        if session.party.all_dead:
            encounter.is_over = True
            encounter.victor = "enemy"
            encounter.round_queue = []
            session.phase = "lost"
            return [EncounterEndedEvent(victor="enemy"), SessionLostEvent()]
        if encounter.enemy.is_alive:
            return []

        encounter.is_over = True
        encounter.victor = "party"
        encounter.round_queue = []
        events: List[DungeonEvent] = [EncounterEndedEvent(victor="party")]
        if encounter.kind == "boss":
            if session.dungeon.ready_for_boss:
                session.phase = "won"
                events.append(SessionWonEvent(boss_name=encounter.enemy.name))
            else:
                session.phase = "exploring"
            return events

        amount = session.rng.roll(session.rules.victory_heal)
        for hero in session.party.alive_heroes:
            hero.heal(amount)
        events.append(VictoryRestEvent(amount=amount))
        session.phase = "exploring"
        return events
