"""Shared type aliases for the core and domain layers."""
from typing import Literal

Phase = Literal["exploring", "in_combat", "boss_combat", "won", "lost"]
Outcome = Literal["win", "lose", "continue"]
EncounterKind = Literal["regular", "boss"]
Victor = Literal["party", "enemy"]
TextDisplayMode = Literal["instant", "step"]

__all__ = ["EncounterKind", "Outcome", "Phase", "TextDisplayMode", "Victor"]
