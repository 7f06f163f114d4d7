"""codebreaker: a minimax solver for no-repeat Mastermind locks."""

__version__ = "1.0.0"
