"""Heroes repository."""
from __future__ import annotations

from typing import Dict, List

from ddc.data.errors import DataValidationError
from ddc.data.repositories.base import RepositoryBase
from ddc.domain.defs import HeroDef

_REQUIRED = {"name", "max_hp", "attack", "defense", "order"}


class HeroesRepository(RepositoryBase[HeroDef]):
    """Loads the starting roster."""

    def __init__(self, base_path=None) -> None:
        super().__init__("heroes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, HeroDef]:
        heroes: Dict[str, HeroDef] = {}
        for raw_id, payload in raw.items():
            context = f"hero '{raw_id}'"
            hero_data = self._require_mapping(payload, context)
            self._assert_fields(hero_data, _REQUIRED, _REQUIRED, context)
            max_hp = self._require_int(hero_data["max_hp"], f"{context} max_hp")
            if max_hp <= 0:
                raise DataValidationError(f"{context} max_hp must be positive.")
            defense = self._require_int(hero_data["defense"], f"{context} defense")
            if defense < 0:
                raise DataValidationError(f"{context} defense cannot be negative.")
            heroes[raw_id] = HeroDef(
                id=raw_id,
                name=self._require_str(hero_data["name"], f"{context} name"),
                max_hp=max_hp,
                attack=self._require_int(hero_data["attack"], f"{context} attack"),
                defense=defense,
                order=self._require_int(hero_data["order"], f"{context} order"),
            )
        if not heroes:
            raise DataValidationError("heroes.json must define at least one hero.")
        return heroes

    def roster(self) -> List[HeroDef]:
        """Return heroes in party order."""
        return sorted(self.all(), key=lambda hero: (hero.order, hero.id))
