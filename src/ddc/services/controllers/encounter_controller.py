"""UI-agnostic controller that drives the dungeon state machine."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from ddc.core.types import Outcome
from ddc.domain.encounter_models import EncounterState, SessionView
from ddc.domain.entities import Hero
from ddc.domain.state import SessionState
from ddc.services.actions import CombatActionId, available_actions
from ddc.services.combat_service import CombatService
from ddc.services.events import AmbushEvent, DungeonEvent
from ddc.services.exploration_service import ExplorationService
from ddc.services.session_service import SessionService


class DungeonActionId(Enum):
    EXPLORE = "explore"
    FIGHT = "fight"
    REPAIR = "repair"
    BOSS = "boss"
    REST = "rest"
    QUIT = "quit"


_DUNGEON_ACTION_LABELS = {
    DungeonActionId.EXPLORE: "Explore",
    DungeonActionId.FIGHT: "Fight (minor encounter)",
    DungeonActionId.REPAIR: "Repair base",
    DungeonActionId.BOSS: "Face the Boss (requires every relic)",
    DungeonActionId.REST: "Rest (heal and lower stress)",
    DungeonActionId.QUIT: "Quit",
}


@dataclass(slots=True)
class DungeonActionResult:
    """Outcome of a main-menu action. ``encounter`` is set when a fight must be played out."""

    events: List[DungeonEvent] = field(default_factory=list)
    encounter: EncounterState | None = None
    quit: bool = False


class EncounterController:
    """
    Orchestrates exploring and fighting without rendering anything.

    The presentation layer asks for the menus, forwards the operator's choice
    and renders the returned events.
    """

    def __init__(
        self,
        session_service: SessionService,
        combat_service: CombatService,
        exploration_service: ExplorationService,
    ) -> None:
        self._sessions = session_service
        self._combat = combat_service
        self._exploration = exploration_service

    def start_session(self, seed: int) -> SessionState:
        return self._sessions.start_new_session(seed)

    def get_session_view(self, session: SessionState) -> SessionView:
        return self._sessions.get_session_view(session)

    def check_outcome(self, session: SessionState) -> Outcome:
        return self._sessions.check_outcome(session)

    def main_menu_options(self) -> List[Tuple[DungeonActionId, str]]:
        return [(action_id, _DUNGEON_ACTION_LABELS[action_id]) for action_id in DungeonActionId]

    def combat_menu(self) -> List[Tuple[CombatActionId, str]]:
        return [(action.action_id, action.label) for action in available_actions()]

    def apply_dungeon_action(self, session: SessionState, action_id: DungeonActionId) -> DungeonActionResult:
        if action_id is DungeonActionId.QUIT:
            return DungeonActionResult(quit=True)

        if action_id is DungeonActionId.EXPLORE:
            events = self._exploration.explore(session)
            if self._exploration.should_ambush(session):
                encounter, start_events = self._combat.start_encounter(session)
                return DungeonActionResult(events=events + [AmbushEvent()] + start_events, encounter=encounter)
            return DungeonActionResult(events=events)

        if action_id is DungeonActionId.FIGHT:
            encounter, events = self._combat.start_encounter(session)
            return DungeonActionResult(events=events, encounter=encounter)

        if action_id is DungeonActionId.BOSS:
            maybe_encounter, events = self._combat.start_boss_encounter(session)
            return DungeonActionResult(events=events, encounter=maybe_encounter)

        if action_id is DungeonActionId.REPAIR:
            return DungeonActionResult(events=self._exploration.repair_base(session))

        if action_id is DungeonActionId.REST:
            return DungeonActionResult(events=self._exploration.rest(session))

        raise ValueError(f"Unknown dungeon action: {action_id}")

    def begin_turn(self, encounter: EncounterState, session: SessionState) -> Tuple[Hero | None, List[DungeonEvent]]:
        return self._combat.begin_turn(encounter, session)

    def resolve_turn(
        self, encounter: EncounterState, session: SessionState, action_id: CombatActionId
    ) -> List[DungeonEvent]:
        return self._combat.resolve_turn(encounter, session, action_id)
