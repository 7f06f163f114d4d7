"""
Collaborators: whoever scores the solver's guesses.

The solve loop only ever talks to a collaborator through three calls:
  - request_score(guess) -> Score   (may block or be awaited indefinitely)
  - on_solved(answer, attempts)     (called once on success)
  - on_error(message)               (called once on failure)

SyntheticCollaborator knows the secret and answers instantly; it's what
batch runs and tests use. ConsoleCollaborator asks a person.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from codebreaker.engine import (DEFAULT_CONFIG, GameConfig, Score, ScoreCache,
                                ScoreParseError, parse_score, render_score, score)


class Collaborator:
    """Base class; records the session outcome for later inspection."""

    def __init__(self):
        self.answer: Optional[str] = None
        self.attempts: Optional[int] = None
        self.error: Optional[str] = None

    def request_score(self, guess: str) -> Score:
        raise NotImplementedError("Override in subclass")

    def on_solved(self, answer: str, attempts: int) -> None:
        self.answer, self.attempts = answer, attempts

    def on_error(self, message: str) -> None:
        self.error = message


class SyntheticCollaborator(Collaborator):
    """Scores guesses against a known secret."""

    def __init__(self, secret: str, cache: Optional[ScoreCache] = None):
        super().__init__()
        self.secret = secret
        self.cache = cache
        self.history: List[Tuple[str, Score]] = []

    def request_score(self, guess: str) -> Score:
        s = score(self.secret, guess, self.cache)
        self.history.append((guess, s))
        return s


class ConsoleCollaborator(Collaborator):
    """
    Line-based prompt. Shows each guess and reads a score such as "1W2B".

    Input is parsed strictly: a typo is reported and the prompt repeats,
    rather than being read as zero pegs.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG,
                 input_fn: Optional[Callable[[str], str]] = None,
                 output_fn: Optional[Callable[[str], None]] = None):
        super().__init__()
        self.config = config
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def request_score(self, guess: str) -> Score:
        self.output_fn(guess)
        while True:
            text = self.input_fn("input> ")
            try:
                return parse_score(text, strict=True, length=self.config.length)
            except ScoreParseError as e:
                self.output_fn(f"{e} (score as e.g. 2W1B; leave blank for no pegs)")

    def on_solved(self, answer: str, attempts: int) -> None:
        super().on_solved(answer, attempts)
        self.output_fn(f"The answer is: {answer}, and I found it in {attempts} tries.")

    def on_error(self, message: str) -> None:
        super().on_error(message)
        self.output_fn(f"Sorry, I don't have an answer: {message}")


def describe(history: List[Tuple[str, Score]]) -> List[Tuple[str, str]]:
    """(guess, Score) pairs -> (guess, "2W1B") pairs for reports."""
    return [(g, render_score(s)) for g, s in history]
