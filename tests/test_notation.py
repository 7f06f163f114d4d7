import pytest
from codebreaker.engine import Score, ScoreParseError, all_scores, parse_score, render_score


@pytest.mark.parametrize("s,text", [
    (Score(2, 1), "2W1B"),
    (Score(0, 3), "3B"),
    (Score(1, 0), "1W"),
    (Score(0, 0), ""),
])
def test_render_score(s, text):
    assert render_score(s) == text


def test_round_trip_all_scores():
    for s in all_scores(4):
        assert parse_score(render_score(s)) == s
        assert parse_score(render_score(s), strict=True, length=4) == s


@pytest.mark.parametrize("text,expected", [
    ("2w1b", Score(2, 1)),
    ("1B2W", Score(2, 1)),
    ("  3b ", Score(0, 3)),
    ("", Score(0, 0)),
    ("nonsense", Score(0, 0)),
    ("2x", Score(0, 0)),
])
def test_parse_lenient_defaults_to_zero(text, expected):
    assert parse_score(text) == expected


@pytest.mark.parametrize("text", ["nonsense", "2x", "2W2W", "1W zz", "3W3B"])
def test_parse_strict_rejects(text):
    with pytest.raises(ScoreParseError):
        parse_score(text, strict=True, length=4)


def test_parse_strict_accepts_spacing():
    assert parse_score("1 w 2 b", strict=True, length=4) == Score(1, 2)
