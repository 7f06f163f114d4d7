from .config import DEFAULT_CONFIG, GameConfig
from .codes import all_codes, code_space_size
from .scoring import DEFAULT_CACHE, Score, ScoreCache, all_scores, score
from .constraints import filter_candidates
from .notation import parse_score, render_score
from .validation import validate_code
from .errors import InvalidConfigError, ScoreParseError

__all__ = [
    "DEFAULT_CONFIG", "GameConfig", "all_codes", "code_space_size",
    "DEFAULT_CACHE", "Score", "ScoreCache", "all_scores", "score",
    "filter_candidates", "parse_score", "render_score", "validate_code",
    "InvalidConfigError", "ScoreParseError",
]
