"""Session construction and win/lose evaluation."""
from __future__ import annotations

from ddc.core.rng import RNG
from ddc.core.types import Outcome
from ddc.data.repositories import EnemiesRepository, HeroesRepository, RulesRepository
from ddc.domain.encounter_models import HeroStatusView, SessionView
from ddc.domain.party import DungeonProgress
from ddc.domain.state import SessionState
from ddc.services.factories import create_boss, create_party


class SessionService:
    """Builds a fresh dungeon run and reports its outcome."""

    def __init__(
        self,
        heroes_repo: HeroesRepository,
        enemies_repo: EnemiesRepository,
        rules_repo: RulesRepository,
    ) -> None:
        self._heroes_repo = heroes_repo
        self._enemies_repo = enemies_repo
        self._rules_repo = rules_repo

    def start_new_session(self, seed: int) -> SessionState:
        rng = RNG(seed)
        rules = self._rules_repo.get()
        return SessionState(
            seed=seed,
            rng=rng,
            party=create_party(self._heroes_repo),
            dungeon=DungeonProgress(relics_required=rules.relics_required),
            boss=create_boss(self._enemies_repo, rng),
            rules=rules,
        )

    def check_outcome(self, session: SessionState) -> Outcome:
        """Evaluate the terminal conditions; a wiped party always loses."""
        if session.party.all_dead:
            session.phase = "lost"
            return "lose"
        if not session.boss.is_alive and session.dungeon.ready_for_boss:
            session.phase = "won"
            return "win"
        return "continue"

    def get_session_view(self, session: SessionState) -> SessionView:
        return SessionView(
            heroes=[
                HeroStatusView(
                    hero_id=hero.id,
                    name=hero.name,
                    hp=hero.hp,
                    max_hp=hero.max_hp,
                    stress=hero.stress,
                    is_alive=hero.is_alive,
                )
                for hero in session.party.heroes
            ],
            relics=session.dungeon.relics,
            relics_required=session.dungeon.relics_required,
            base_functional=session.dungeon.base_functional,
            phase=session.phase,
        )
