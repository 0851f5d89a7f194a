"""Console-driven UI loops for the dungeon crawl and the blackjack table."""
from __future__ import annotations

import secrets
from pathlib import Path
from typing import Callable, Dict, List, Literal, Sequence, Tuple

from ddc.core.rng import RNG
from ddc.data.repositories import EnemiesRepository, HeroesRepository, RulesRepository
from ddc.domain.encounter_models import EncounterState
from ddc.domain.state import SessionState
from ddc.presentation.cli.config import load_config, save_config
from ddc.presentation.cli.render import (
    coerce_choice,
    debug_enabled,
    render_bullet_lines,
    render_heading,
    render_menu,
    render_status,
    render_table,
)
from ddc.services import (
    BlackjackService,
    CombatService,
    EncounterController,
    ExplorationService,
    SessionService,
)
from ddc.services.blackjack_service import CardDrawnEvent, RoundResolvedEvent, RoundStartedEvent, TableEvent
from ddc.services.events import (
    AmbushEvent,
    BaseDamagedEvent,
    BaseRepairedEvent,
    BossLockedEvent,
    DreadEvent,
    DungeonEvent,
    EncounterEndedEvent,
    EncounterStartedEvent,
    EnemyAttackEvent,
    EnemyDefeatedEvent,
    GuardRaisedEvent,
    HeroFallenEvent,
    HeroTurnEvent,
    PanicEvent,
    PartyRestedEvent,
    QuietCorridorEvent,
    RelicFoundEvent,
    SessionLostEvent,
    SessionWonEvent,
    StressRelievedEvent,
    StrikeResolvedEvent,
    TensionEvent,
    TrapTriggeredEvent,
    VictoryRestEvent,
)

MenuAction = Literal["dungeon", "blackjack", "options", "quit"]
_MAX_RANDOM_SEED = 2**31 - 1


def main() -> None:
    """Start the interactive CLI session."""
    config = load_config()
    controller = _build_encounter_controller()
    print("=== Dungeon Crawl Console ===")
    try:
        running = True
        while running:
            action = _main_menu_loop()
            if action == "dungeon":
                _run_dungeon(controller, config)
            elif action == "blackjack":
                _run_blackjack()
            elif action == "options":
                config = _run_options_menu(config)
            else:
                running = False
    except (EOFError, KeyboardInterrupt):
        print()
    print("\nThanks for playing!")


def _main_menu_options() -> List[Tuple[str, MenuAction]]:
    return [
        ("Dungeon Crawl", "dungeon"),
        ("Blackjack", "blackjack"),
        ("Options", "options"),
        ("Quit", "quit"),
    ]


def _main_menu_loop() -> MenuAction:
    options = _main_menu_options()
    render_menu("Main Menu", [label for label, _ in options])
    index = coerce_choice(input("Select an option: "), len(options))
    return options[index - 1][1]


def _build_encounter_controller(base_path: Path | str | None = None) -> EncounterController:
    """Construct the EncounterController with concrete repositories."""
    heroes_repo = HeroesRepository(base_path)
    enemies_repo = EnemiesRepository(base_path)
    rules_repo = RulesRepository(base_path)
    return EncounterController(
        session_service=SessionService(heroes_repo=heroes_repo, enemies_repo=enemies_repo, rules_repo=rules_repo),
        combat_service=CombatService(enemies_repo=enemies_repo),
        exploration_service=ExplorationService(),
    )


def _prompt_seed(read: Callable[[str], str] = input) -> int:
    while True:
        raw_value = read("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


# -----------------------
# Dungeon
# -----------------------
def _run_dungeon(
    controller: EncounterController,
    config: Dict[str, str],
    *,
    read: Callable[[str], str] = input,
) -> SessionState:
    """Run the exploration loop until the player quits, wins or loses."""
    seed = _prompt_seed(read)
    session = controller.start_session(seed)
    print(f"Descending with seed: {seed}")
    menu = controller.main_menu_options()
    while True:
        render_status(controller.get_session_view(session))
        outcome = controller.check_outcome(session)
        if outcome == "lose":
            print("Your company has fallen. Defeat.")
            return session
        if outcome == "win":
            print("You gathered every relic and vanquished the Boss!")
            return session

        render_menu("Actions", [label for _, label in menu])
        action_id = menu[coerce_choice(read("Choose: "), len(menu)) - 1][0]
        result = controller.apply_dungeon_action(session, action_id)
        _render_dungeon_events(result.events)
        if result.quit:
            return session
        if result.encounter is not None:
            _run_encounter(controller, session, result.encounter, config, read=read)


def _run_encounter(
    controller: EncounterController,
    session: SessionState,
    encounter: EncounterState,
    config: Dict[str, str],
    *,
    read: Callable[[str], str] = input,
) -> None:
    menu = controller.combat_menu()
    step_mode = config.get("text_display_mode") == "step"
    while not encounter.is_over:
        hero, turn_events = controller.begin_turn(encounter, session)
        if hero is None:
            break
        _render_dungeon_events(turn_events)
        for idx, (_, label) in enumerate(menu, start=1):
            print(f"  {idx}. {label}")
        index = coerce_choice(read(f"Action (1-{len(menu)}): "), len(menu))
        events = controller.resolve_turn(encounter, session, menu[index - 1][0])
        _render_dungeon_events(events)
        if step_mode and not encounter.is_over:
            read("(press Enter to continue)")


def _render_dungeon_events(events: Sequence[DungeonEvent]) -> None:
    lines = [line for line in (_format_dungeon_event(event) for event in events) if line]
    render_bullet_lines(lines)


def _format_dungeon_event(event: DungeonEvent) -> str | None:
    if isinstance(event, EncounterStartedEvent):
        prefix = "BOSS: " if event.kind == "boss" else ""
        return f"{prefix}{event.enemy_name} appears! (HP {event.enemy_hp})"
    if isinstance(event, HeroTurnEvent):
        return f"{event.hero_name}'s turn. {event.enemy_name} HP: {event.enemy_hp}"
    if isinstance(event, StrikeResolvedEvent):
        crit = " (CRITICAL)" if event.is_critical else ""
        return f"{event.hero_name} strikes for {event.damage}{crit}. {event.target_name} HP {event.target_hp}."
    if isinstance(event, GuardRaisedEvent):
        return f"{event.hero_name} takes a defensive stance (+{event.amount} DEF this turn)."
    if isinstance(event, StressRelievedEvent):
        return f"{event.hero_name} steadies their nerves, -{event.amount} stress (now {event.stress})."
    if isinstance(event, EnemyAttackEvent):
        verb = "punishes" if event.is_boss else "hits"
        return (
            f"{event.enemy_name} {verb} {event.target_name} for {event.damage} "
            f"(+{event.stress_gained} stress, HP {event.target_hp})."
        )
    if isinstance(event, DreadEvent):
        return f"Dread seeps into the party (+{event.amount} stress each)."
    if isinstance(event, PanicEvent):
        return f"{event.hero_name} breaks under stress and takes {event.damage}! (HP {event.hero_hp})"
    if isinstance(event, HeroFallenEvent):
        return f"{event.hero_name} falls."
    if isinstance(event, EnemyDefeatedEvent):
        return f"{event.enemy_name} is defeated."
    if isinstance(event, VictoryRestEvent):
        return f"A short respite: survivors recover {event.amount} HP."
    if isinstance(event, EncounterEndedEvent):
        return "The party is annihilated..." if event.victor == "enemy" else None
    if isinstance(event, BossLockedEvent):
        return f"You still lack relics ({event.relics}/{event.relics_required})."
    if isinstance(event, RelicFoundEvent):
        return f"Relic found ({event.relics}/{event.relics_required})."
    if isinstance(event, TrapTriggeredEvent):
        return f"Trap! {event.hero_name} takes {event.damage} and gains {event.stress_gained} stress."
    if isinstance(event, BaseDamagedEvent):
        if event.reason == "incident":
            return "Incident at camp: the base is NOT functional."
        return "The base is left NOT functional."
    if isinstance(event, QuietCorridorEvent):
        return "A minor encounter without consequences."
    if isinstance(event, TensionEvent):
        return f"Tension: {event.hero_name} gains {event.stress_gained} stress."
    if isinstance(event, AmbushEvent):
        return "Something followed you out of the dark!"
    if isinstance(event, BaseRepairedEvent):
        return "The base is already functional." if event.already_functional else "Base repaired."
    if isinstance(event, PartyRestedEvent):
        details = ", ".join(f"{name} +{hp} HP/-{stress} stress" for name, hp, stress in event.recovered)
        return f"You rest. {details}" if details else "You rest."
    if isinstance(event, SessionWonEvent):
        return f"You have defeated {event.boss_name}!"
    if isinstance(event, SessionLostEvent):
        return None
    return str(event) if debug_enabled() else None


# -----------------------
# Blackjack
# -----------------------
def _run_blackjack(*, read: Callable[[str], str] = input, seed: int | None = None) -> None:
    service = BlackjackService(RNG(seed if seed is not None else secrets.randbelow(_MAX_RANDOM_SEED)))
    table = service.new_table()
    while True:
        _render_table_events(service.start_round(table))
        while not table.is_round_over:
            render_table(service.get_table_view(table))
            choice = coerce_choice(read("1. Hit  2. Stand: "), 2)
            events = service.hit(table) if choice == 1 else service.stand(table)
            _render_table_events(events)
        render_table(service.get_table_view(table))
        if coerce_choice(read("1. New round  2. Leave table: "), 2) == 2:
            return


def _render_table_events(events: Sequence[TableEvent]) -> None:
    for event in events:
        if isinstance(event, RoundStartedEvent):
            render_heading(f"Round {event.round_number}")
            if event.shoe_replenished:
                print("- The dealer brings out a fresh shoe.")
        elif isinstance(event, CardDrawnEvent):
            who = "You draw" if event.seat == "player" else "Dealer draws"
            print(f"- {who} {event.card} ({event.total}).")
        elif isinstance(event, RoundResolvedEvent):
            print(f"- {event.message}")


# -----------------------
# Options
# -----------------------
def _run_options_menu(
    config: Dict[str, str],
    *,
    read: Callable[[str], str] = input,
    path: Path | None = None,
) -> Dict[str, str]:
    current = config.get("text_display_mode", "instant")
    render_menu(
        f"Options (text display: {current})",
        ["Instant combat log", "Step through combat turns", "Back"],
    )
    choice = coerce_choice(read("Select an option: "), 3)
    if choice == 3:
        return config
    updated = dict(config)
    updated["text_display_mode"] = "instant" if choice == 1 else "step"
    save_config(updated, path)
    print(f"Text display set to {updated['text_display_mode']}.")
    return updated
