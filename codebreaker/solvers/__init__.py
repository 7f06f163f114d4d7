from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, register

from . import minimax  # noqa: F401
from . import random_consistent  # noqa: F401

DEFAULT_SOLVER = "minimax"


def create_solver(solver_id: str = DEFAULT_SOLVER) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
