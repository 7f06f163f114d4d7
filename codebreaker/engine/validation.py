"""
Lightweight code validation.

A code is valid for a config iff:
  - it is a string
  - it has exactly `config.length` symbols
  - every symbol is in the config's alphabet
  - no symbol repeats

Used for user-supplied openers and secrets. The solver itself never checks
codes it produces: they all come out of the code space generator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import GameConfig


def validate_code(code: object, config: "GameConfig") -> bool:
    """Return True if `code` is a well-formed code under `config`."""
    if not isinstance(code, str):
        return False
    if len(code) != config.length:
        return False
    if any(ch not in config.colors for ch in code):
        return False
    return len(set(code)) == len(code)
