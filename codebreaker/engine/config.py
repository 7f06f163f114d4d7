"""
Game configuration.

A lock is described by its color alphabet and its code length. Codes never
repeat a color, so the length can't exceed the number of colors; that is
checked here, once, when the config is built, rather than on every call
into the engine.

The opening guess defaults to the first `length` colors of the alphabet.
Since no code repeats a color, every opener is the same as every other up
to relabelling colors and slots, so there is nothing to tune.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidConfigError
from .validation import validate_code

DEFAULT_COLORS = "BGORYP"
DEFAULT_LENGTH = 4


@dataclass(frozen=True)
class GameConfig:
    colors: str = DEFAULT_COLORS
    length: int = DEFAULT_LENGTH
    opener: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.colors:
            raise InvalidConfigError("At least one color is required")
        if len(set(self.colors)) != len(self.colors):
            raise InvalidConfigError(f"Duplicate colors in alphabet: {self.colors!r}")
        if self.length < 1:
            raise InvalidConfigError(f"Code length must be positive; got {self.length}")
        if self.length > len(self.colors):
            raise InvalidConfigError(
                f"Code length {self.length} exceeds the {len(self.colors)} available colors; "
                "codes can't be built without repeating a color"
            )
        if self.opener is not None:
            if not validate_code(self.opener, self):
                raise InvalidConfigError(f"Opener {self.opener!r} is not a valid code")

    @property
    def first_guess(self) -> str:
        """The opener if one was given, else the first `length` colors."""
        return self.opener if self.opener is not None else self.colors[: self.length]


DEFAULT_CONFIG = GameConfig()
