from __future__ import annotations
import random
from typing import Collection, Dict, List, Sequence, Type

from codebreaker.engine import DEFAULT_CACHE, DEFAULT_CONFIG, GameConfig, ScoreCache

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.config: GameConfig = DEFAULT_CONFIG
        self.cache: ScoreCache = DEFAULT_CACHE
        self.rng = random.Random()

    def reset(self, *, config: GameConfig = DEFAULT_CONFIG,
              cache: ScoreCache | None = None, seed: int | None = None) -> None:
        self.config = config
        self.cache = cache if cache is not None else DEFAULT_CACHE
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, remaining: Sequence[str], used: Collection[str]) -> str:
        """
        Pick the next code to play.

        Args:
          remaining: candidates still consistent with every score so far (non-empty)
          used:      codes already played this session
        """
        raise NotImplementedError("Override in subclass")


def unused(remaining: Sequence[str], used: Collection[str]) -> List[str]:
    return [c for c in remaining if c not in used]
