"""Encounter tuning repository."""
from __future__ import annotations

from dataclasses import fields, is_dataclass, replace
from pathlib import Path
from typing import Any

from ddc.data import paths
from ddc.data.errors import DataValidationError
from ddc.data.json_loader import load_json_object
from ddc.domain.defs import EncounterRules


class RulesRepository:
    """Loads rules.json as overrides on top of the EncounterRules defaults.

    Sections mirror the dataclass nesting, e.g. ``{"strike": {"crit_chance": 0.2}}``.
    Missing keys keep their defaults; unknown keys are rejected.
    """

    def __init__(self, base_path: Path | str | None = None, filename: str = "rules.json") -> None:
        self._base_path = Path(base_path) if base_path is not None else None
        self._filename = filename
        self._rules: EncounterRules | None = None

    def get(self) -> EncounterRules:
        if self._rules is None:
            file_path = paths.get_definitions_path(self._base_path) / self._filename
            raw = load_json_object(file_path)
            self._rules = _apply_overrides(EncounterRules(), raw, "rules")
        return self._rules


def _apply_overrides(target: Any, overrides: dict[str, object], context: str) -> Any:
    known = {f.name: getattr(target, f.name) for f in fields(target)}
    changes: dict[str, object] = {}
    for key, value in overrides.items():
        if key not in known:
            raise DataValidationError(f"{context} has unknown field '{key}'.")
        current = known[key]
        field_context = f"{context}.{key}"
        if is_dataclass(current):
            if not isinstance(value, dict):
                raise DataValidationError(f"{field_context} must be an object.")
            changes[key] = _apply_overrides(current, value, field_context)
        elif isinstance(current, tuple):
            changes[key] = _coerce_range(value, field_context)
        elif isinstance(current, float):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise DataValidationError(f"{field_context} must be a number.")
            if not 0.0 <= value <= 1.0:
                raise DataValidationError(f"{field_context} must be a probability between 0 and 1.")
            changes[key] = float(value)
        else:
            if isinstance(value, bool) or not isinstance(value, int):
                raise DataValidationError(f"{field_context} must be an integer.")
            changes[key] = value
    return replace(target, **changes)


def _coerce_range(value: object, context: str) -> tuple[int, int]:
    if (
        not isinstance(value, list)
        or len(value) != 2
        or any(isinstance(item, bool) or not isinstance(item, int) for item in value)
    ):
        raise DataValidationError(f"{context} must be a [min, max] pair of integers.")
    low, high = value
    if low > high:
        raise DataValidationError(f"{context} min {low} exceeds max {high}.")
    return low, high
