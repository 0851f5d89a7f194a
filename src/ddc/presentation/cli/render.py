"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, Sequence

from ddc.domain.encounter_models import SessionView
from ddc.services.blackjack_service import TableView

_NAME_WIDTH = 14


def debug_enabled() -> bool:
    """Return True only when DDC_DEBUG is explicitly set to '1'."""
    return os.getenv("DDC_DEBUG") == "1"


def coerce_choice(raw: str | None, option_count: int) -> int:
    """
    Map operator input onto a 1-based menu index without ever rejecting it.

    Missing or non-numeric input selects the first option; numbers outside the
    menu are clamped to the nearest valid entry.
    """
    if option_count <= 0:
        raise ValueError("Menu has no options.")
    try:
        value = int((raw or "").strip())
    except ValueError:
        return 1
    return max(1, min(option_count, value))


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")


def format_status_lines(view: SessionView) -> list[str]:
    lines = []
    for hero in view.heroes:
        hp = f"{hero.hp:>2}/{hero.max_hp}"
        status = "" if hero.is_alive else "  (DOWN)"
        lines.append(f"{hero.name:<{_NAME_WIDTH}} HP {hp} | Stress {hero.stress}{status}")
    base = "Functional" if view.base_functional else "NOT functional"
    lines.append(f"Relics: {view.relics}/{view.relics_required} | Base: {base}")
    if debug_enabled():
        lines.append(f"[debug] phase={view.phase}")
    return lines


def render_status(view: SessionView) -> None:
    render_heading("Status")
    for line in format_status_lines(view):
        print(line)


def render_table(view: TableView) -> None:
    render_heading("Table")
    print(f"Dealer: {view.dealer_cards} = {view.dealer_total}")
    print(f"You:    {view.player_cards} = {view.player_total}")
