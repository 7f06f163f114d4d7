"""
Text form of a score, e.g. "2W1B".

Rendering omits a channel whose count is zero, so Score(0, 3) is "3B" and
Score(0, 0) is the empty string. Parsing defaults a missing channel to zero
so every rendered score reads back unchanged.

parse_score is lenient by default: anything it can't make sense of counts
as zero. Pass strict=True to get a ScoreParseError instead, which is what
an interactive prompt wants so a typo can be re-entered.
"""

from __future__ import annotations

import re
from typing import Optional

from .errors import ScoreParseError
from .scoring import Score

_CHANNEL = re.compile(r"(\d)\s*([wb])")


def render_score(s: Score) -> str:
    out = ""
    if s.white:
        out += f"{s.white}W"
    if s.black:
        out += f"{s.black}B"
    return out


def parse_score(text: str, *, strict: bool = False, length: Optional[int] = None) -> Score:
    """
    Parse a score like "2W1B", "1b 2w" or "" into a Score.

    Args:
      text   : user-supplied score text (case-insensitive)
      strict : raise ScoreParseError on junk, repeated channels, or a total
               above `length`, instead of quietly treating them as zero
      length : code length used for the strict bounds check
    """
    lowered = text.strip().lower()

    if not strict:
        w = re.search(r"(\d)w", lowered)
        b = re.search(r"(\d)b", lowered)
        return Score(white=int(w.group(1)) if w else 0,
                     black=int(b.group(1)) if b else 0)

    counts = {}
    for m in _CHANNEL.finditer(lowered):
        channel = m.group(2)
        if channel in counts:
            raise ScoreParseError(f"{channel.upper()} given more than once in {text!r}")
        counts[channel] = int(m.group(1))

    leftover = _CHANNEL.sub("", lowered).strip()
    if leftover:
        raise ScoreParseError(f"Can't read {leftover!r} in score {text!r}; expected e.g. '2W1B'")

    parsed = Score(white=counts.get("w", 0), black=counts.get("b", 0))
    if length is not None and parsed.total > length:
        raise ScoreParseError(f"Score {text!r} has more than {length} pegs")
    return parsed
