from __future__ import annotations

import pytest

from ddc.data.repositories import EnemiesRepository
from ddc.services.actions import CombatActionId
from ddc.services.combat_service import CombatService
from ddc.services.errors import EncounterError
from ddc.services.events import (
    BossLockedEvent,
    DreadEvent,
    EncounterEndedEvent,
    EncounterStartedEvent,
    EnemyAttackEvent,
    EnemyDefeatedEvent,
    HeroFallenEvent,
    PanicEvent,
    SessionLostEvent,
    SessionWonEvent,
)
from tests.helpers.scripted_rng import ScriptedRNG
from tests.helpers.sessions import make_encounter, make_enemy, make_hero, make_session


def _service() -> CombatService:
    return CombatService(enemies_repo=EnemiesRepository())


def test_single_strike_defeats_weak_enemy_without_retaliation() -> None:
    service = _service()
    hero = make_hero(hp=10, attack=5, defense=0)
    session = make_session([hero], rng=ScriptedRNG())
    session.phase = "in_combat"
    encounter = make_encounter(make_enemy(hp=5, attack=0))

    acting, _ = service.begin_turn(encounter, session)
    events = service.resolve_turn(encounter, session, CombatActionId.STRIKE)

    assert acting is hero
    assert encounter.enemy.hp == 0
    assert encounter.is_over
    assert encounter.victor == "party"
    assert encounter.round_number == 1
    assert hero.hp == 10
    assert not any(isinstance(evt, EnemyAttackEvent) for evt in events)
    assert any(isinstance(evt, EnemyDefeatedEvent) for evt in events)
    assert session.phase == "exploring"


def test_guard_bonus_is_reverted_after_the_turn() -> None:
    service = _service()
    hero = make_hero(hp=20, defense=2)
    session = make_session([hero], rng=ScriptedRNG())
    encounter = make_encounter(make_enemy(hp=50, attack=6))

    service.begin_turn(encounter, session)
    events = service.resolve_turn(encounter, session, CombatActionId.GUARD)

    attack = next(evt for evt in events if isinstance(evt, EnemyAttackEvent))
    assert attack.damage == 1  # 6 raw against 2 + 3 guard
    assert hero.defense == 2

    service.begin_turn(encounter, session)
    events = service.resolve_turn(encounter, session, CombatActionId.CALM)
    attack = next(evt for evt in events if isinstance(evt, EnemyAttackEvent))
    assert attack.damage == 4
    assert hero.defense == 2


def test_guard_is_reverted_even_when_the_party_falls() -> None:
    service = _service()
    hero = make_hero(hp=1, defense=0)
    session = make_session([hero], rng=ScriptedRNG())
    encounter = make_encounter(make_enemy(hp=50, attack=10))

    service.begin_turn(encounter, session)
    service.resolve_turn(encounter, session, CombatActionId.GUARD)

    assert hero.hp == 0
    assert hero.defense == 0


def test_retaliation_adds_stress_to_target() -> None:
    service = _service()
    hero = make_hero(hp=30, stress=10)
    session = make_session([hero], rng=ScriptedRNG(ints=[0, 0, 2, 9]))
    encounter = make_encounter(make_enemy(hp=50, attack=5))

    service.begin_turn(encounter, session)
    events = service.resolve_turn(encounter, session, CombatActionId.GUARD)

    attack = next(evt for evt in events if isinstance(evt, EnemyAttackEvent))
    assert attack.damage == 4  # 5 + 2 variance - 3 guard
    assert attack.stress_gained == 9
    assert hero.stress == 19


def test_panic_deals_unmitigated_damage_at_high_stress() -> None:
    service = _service()
    hero = make_hero(hp=20, defense=5, stress=150)
    # crit roll misses, then the panic roll succeeds
    session = make_session([hero], rng=ScriptedRNG(floats=[0.99, 0.0]))
    encounter = make_encounter(make_enemy(hp=100, attack=0))

    service.begin_turn(encounter, session)
    events = service.resolve_turn(encounter, session, CombatActionId.STRIKE)

    panic = next(evt for evt in events if isinstance(evt, PanicEvent))
    assert panic.damage == 3
    assert hero.hp == 17


def test_no_panic_below_threshold() -> None:
    service = _service()
    hero = make_hero(hp=20, stress=90)
    session = make_session([hero], rng=ScriptedRNG(floats=[0.0, 0.0]))
    encounter = make_encounter(make_enemy(hp=100, attack=0))

    service.begin_turn(encounter, session)
    events = service.resolve_turn(encounter, session, CombatActionId.GUARD)

    assert hero.stress == 93
    assert not any(isinstance(evt, PanicEvent) for evt in events)
    assert hero.hp == 20


def test_panic_threshold_is_checked_after_retaliation_stress() -> None:
    service = _service()
    hero = make_hero(hp=20, stress=99)
    session = make_session([hero], rng=ScriptedRNG(floats=[0.0]))
    encounter = make_encounter(make_enemy(hp=100, attack=0))

    service.begin_turn(encounter, session)
    events = service.resolve_turn(encounter, session, CombatActionId.GUARD)

    assert hero.stress == 102
    assert any(isinstance(evt, PanicEvent) for evt in events)


def test_party_wipe_ends_encounter_as_lost() -> None:
    service = _service()
    hero = make_hero(hp=3)
    session = make_session([hero], rng=ScriptedRNG())
    session.phase = "in_combat"
    encounter = make_encounter(make_enemy(hp=50, attack=9))

    service.begin_turn(encounter, session)
    events = service.resolve_turn(encounter, session, CombatActionId.CALM)

    assert session.party.all_dead
    assert encounter.is_over
    assert encounter.victor == "enemy"
    assert session.phase == "lost"
    assert any(isinstance(evt, HeroFallenEvent) for evt in events)
    assert isinstance(events[-1], SessionLostEvent)


def test_regular_victory_heals_survivors() -> None:
    service = _service()
    hero = make_hero(hp=20, attack=10)
    hero.hp = 10
    session = make_session([hero], rng=ScriptedRNG(ints=[0, 0, 6]))
    encounter = make_encounter(make_enemy(hp=5, attack=0))

    service.begin_turn(encounter, session)
    events = service.resolve_turn(encounter, session, CombatActionId.STRIKE)

    assert hero.hp == 16
    assert EncounterEndedEvent(victor="party") in events


def test_resolve_without_begin_turn_raises() -> None:
    service = _service()
    session = make_session()
    encounter = make_encounter(make_enemy())
    with pytest.raises(EncounterError):
        service.resolve_turn(encounter, session, CombatActionId.STRIKE)


def test_resolve_on_finished_encounter_raises() -> None:
    service = _service()
    session = make_session([make_hero(attack=50)], rng=ScriptedRNG())
    encounter = make_encounter(make_enemy(hp=1, attack=0))
    service.begin_turn(encounter, session)
    service.resolve_turn(encounter, session, CombatActionId.STRIKE)

    assert service.begin_turn(encounter, session) == (None, [])
    encounter.current_hero_id = session.party.heroes[0].id
    with pytest.raises(EncounterError):
        service.resolve_turn(encounter, session, CombatActionId.STRIKE)


def test_start_encounter_rolls_enemy_from_definitions() -> None:
    service = _service()
    session = make_session()
    encounter, events = service.start_encounter(session)

    assert session.phase == "in_combat"
    assert encounter.kind == "regular"
    assert not encounter.enemy.is_boss
    assert encounter.enemy.hp == encounter.enemy.max_hp > 0
    assert isinstance(events[0], EncounterStartedEvent)


def test_start_encounter_outside_exploration_raises() -> None:
    service = _service()
    session = make_session()
    session.phase = "in_combat"
    with pytest.raises(EncounterError):
        service.start_encounter(session)


def test_boss_encounter_rejected_without_relics() -> None:
    service = _service()
    session = make_session(relics=3)
    boss_hp = session.boss.hp

    encounter, events = service.start_boss_encounter(session)

    assert encounter is None
    assert events == [BossLockedEvent(relics=3, relics_required=4)]
    assert session.phase == "exploring"
    assert session.boss.hp == boss_hp


def test_boss_round_lets_every_living_hero_act_in_order() -> None:
    service = _service()
    heroes = [make_hero("a", hp=30), make_hero("b", hp=30), make_hero("c", hp=30)]
    session = make_session(heroes, rng=ScriptedRNG(), relics=4, boss=make_enemy(hp=500, attack=0, is_boss=True))
    encounter, _ = service.start_boss_encounter(session)
    assert encounter is not None
    assert session.phase == "boss_combat"

    order = []
    for _ in range(4):
        hero, _ = service.begin_turn(encounter, session)
        order.append((hero.id, encounter.round_number))
        service.resolve_turn(encounter, session, CombatActionId.GUARD)

    assert order == [("a", 1), ("b", 1), ("c", 1), ("a", 2)]


def test_boss_round_skips_fallen_heroes() -> None:
    service = _service()
    heroes = [make_hero("a"), make_hero("b"), make_hero("c")]
    session = make_session(heroes, rng=ScriptedRNG(), relics=4, boss=make_enemy(hp=500, attack=0, is_boss=True))
    encounter, _ = service.start_boss_encounter(session)

    service.begin_turn(encounter, session)
    heroes[1].hp = 0
    hero, _ = service.begin_turn(encounter, session)
    assert hero.id == "c"


def test_boss_turn_adds_dread_stress() -> None:
    service = _service()
    heroes = [make_hero("a", hp=30), make_hero("b", hp=30)]
    session = make_session(heroes, rng=ScriptedRNG(), relics=4, boss=make_enemy(hp=500, attack=0, is_boss=True))
    encounter, _ = service.start_boss_encounter(session)

    service.begin_turn(encounter, session)
    events = service.resolve_turn(encounter, session, CombatActionId.GUARD)

    assert DreadEvent(amount=2) in events
    # hero a took the boss's retaliation stress (7) plus dread; b only dread
    assert heroes[0].stress == 9
    assert heroes[1].stress == 2


def test_boss_victory_wins_the_session() -> None:
    service = _service()
    hero = make_hero(attack=20)
    session = make_session([hero], rng=ScriptedRNG(), relics=4, boss=make_enemy(hp=10, attack=12, is_boss=True))
    encounter, _ = service.start_boss_encounter(session)

    service.begin_turn(encounter, session)
    events = service.resolve_turn(encounter, session, CombatActionId.STRIKE)

    assert session.boss.hp == 0
    assert session.phase == "won"
    assert isinstance(events[-1], SessionWonEvent)
