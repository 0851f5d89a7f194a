from ddc.domain.defs import EncounterRules
from ddc.domain.party import Party
from ddc.services.actions import (
    ACTION_REGISTRY,
    ActionContext,
    CombatActionId,
    available_actions,
    get_action,
)
from ddc.services.events import GuardRaisedEvent, StressRelievedEvent, StrikeResolvedEvent
from tests.helpers.scripted_rng import ScriptedRNG
from tests.helpers.sessions import make_enemy, make_hero


def _context(hero, enemy, rng):
    return ActionContext(hero=hero, party=Party(heroes=[hero]), enemy=enemy, rng=rng, rules=EncounterRules())


def test_menu_order_is_strike_guard_calm() -> None:
    assert [action.action_id for action in available_actions()] == [
        CombatActionId.STRIKE,
        CombatActionId.GUARD,
        CombatActionId.CALM,
    ]
    assert set(ACTION_REGISTRY) == set(CombatActionId)


def test_strike_applies_variance_and_floors_enemy_hp() -> None:
    hero = make_hero(attack=8)
    enemy = make_enemy(hp=30)
    events = get_action(CombatActionId.STRIKE).apply(_context(hero, enemy, ScriptedRNG(ints=[3])))

    assert enemy.hp == 30 - 11
    assert events == [
        StrikeResolvedEvent(
            hero_id=hero.id,
            hero_name=hero.name,
            target_name=enemy.name,
            damage=11,
            is_critical=False,
            target_hp=19,
        )
    ]


def test_strike_critical_doubles_damage() -> None:
    hero = make_hero(attack=8)
    enemy = make_enemy(hp=30)
    events = get_action(CombatActionId.STRIKE).apply(_context(hero, enemy, ScriptedRNG(ints=[-2], floats=[0.01])))

    assert events[0].is_critical
    assert events[0].damage == 12
    assert enemy.hp == 18


def test_strike_never_deals_negative_damage() -> None:
    hero = make_hero(attack=1)
    enemy = make_enemy(hp=10)
    events = get_action(CombatActionId.STRIKE).apply(_context(hero, enemy, ScriptedRNG(ints=[-2])))

    assert events[0].damage == 0
    assert enemy.hp == 10


def test_strike_overkill_leaves_enemy_at_zero() -> None:
    hero = make_hero(attack=40)
    enemy = make_enemy(hp=5)
    before = enemy.hp
    events = get_action(CombatActionId.STRIKE).apply(_context(hero, enemy, ScriptedRNG()))

    assert enemy.hp == max(0, before - events[0].damage)
    assert enemy.hp == 0


def test_guard_raises_defense() -> None:
    hero = make_hero(defense=2)
    events = get_action(CombatActionId.GUARD).apply(_context(hero, make_enemy(), ScriptedRNG()))

    assert hero.defense == 5
    assert isinstance(events[0], GuardRaisedEvent)
    assert events[0].amount == 3


def test_calm_lowers_stress_by_rolled_amount() -> None:
    hero = make_hero(stress=40)
    events = get_action(CombatActionId.CALM).apply(_context(hero, make_enemy(), ScriptedRNG(ints=[12])))

    assert hero.stress == 28
    assert events == [StressRelievedEvent(hero_id=hero.id, hero_name=hero.name, amount=12, stress=28)]


def test_calm_cannot_push_stress_below_zero() -> None:
    hero = make_hero(stress=3)
    get_action(CombatActionId.CALM).apply(_context(hero, make_enemy(), ScriptedRNG(ints=[15])))
    assert hero.stress == 0
