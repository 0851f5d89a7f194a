"""Enemies repository."""
from __future__ import annotations

from typing import Dict, List

from ddc.data.errors import DataReferenceError
from ddc.data.repositories.base import RepositoryBase
from ddc.domain.defs import EnemyDef

_REQUIRED = {"name", "hp", "attack"}
_ALLOWED = _REQUIRED | {"boss"}


class EnemiesRepository(RepositoryBase[EnemyDef]):
    """Loads regular foes and the single boss.

    ``hp`` and ``attack`` are ``[min, max]`` pairs; the boss uses a pair with
    equal bounds.
    """

    def __init__(self, base_path=None) -> None:
        super().__init__("enemies.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EnemyDef]:
        enemies: Dict[str, EnemyDef] = {}
        for raw_id, payload in raw.items():
            context = f"enemy '{raw_id}'"
            enemy_data = self._require_mapping(payload, context)
            self._assert_fields(enemy_data, _REQUIRED, _ALLOWED, context)
            enemies[raw_id] = EnemyDef(
                id=raw_id,
                name=self._require_str(enemy_data["name"], f"{context} name"),
                hp_range=self._require_range(enemy_data["hp"], f"{context} hp"),
                attack_range=self._require_range(enemy_data["attack"], f"{context} attack"),
                is_boss=self._require_bool(enemy_data.get("boss", False), f"{context} boss"),
            )
        return enemies

    def regular(self) -> List[EnemyDef]:
        """Return every non-boss enemy sorted by id."""
        regular = [enemy for enemy in self.all() if not enemy.is_boss]
        if not regular:
            raise DataReferenceError("enemies.json defines no regular enemies.")
        return regular

    def boss(self) -> EnemyDef:
        bosses = [enemy for enemy in self.all() if enemy.is_boss]
        if len(bosses) != 1:
            raise DataReferenceError(f"enemies.json must define exactly one boss, found {len(bosses)}.")
        return bosses[0]
