"""
Candidate space generation.

The full space is every ordered selection of `length` distinct colors, i.e.
colors!/(colors-length)! codes (360 for 6 colors / 4 slots). Order follows
the alphabet, so the list is stable from run to run and the solver's
tie-breaks are reproducible.
"""

from __future__ import annotations

from itertools import permutations
from math import perm
from typing import List

from .config import DEFAULT_CONFIG, GameConfig


def all_codes(config: GameConfig = DEFAULT_CONFIG) -> List[str]:
    """Return every valid code for `config`, in alphabet order."""
    return ["".join(p) for p in permutations(config.colors, config.length)]


def code_space_size(config: GameConfig = DEFAULT_CONFIG) -> int:
    return perm(len(config.colors), config.length)
