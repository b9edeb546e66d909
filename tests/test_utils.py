from types import SimpleNamespace

import pytest

from caseview.core.utils import clamp_limit, first_per_key, trim_trailing_slash


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, 10),
        (10, 10),
        (0, 1),
        (-5, 1),
        (100, 25),
        (25, 25),
        ("3", 3),
        (" 7 ", 7),
        ("abc", 1),
        ("", 1),
        (float("nan"), 1),
        ("NaN", 1),
        (float("inf"), 25),
        (2.7, 2),
        ([], 1),
    ],
)
def test_clamp_limit(value, expected):
    result = clamp_limit(value)
    assert result == expected
    assert isinstance(result, int)
    assert 1 <= result <= 25


def test_clamp_limit_custom_default():
    assert clamp_limit(None, default=5) == 5


def test_trim_trailing_slash():
    assert trim_trailing_slash("https://portal.example.com///") == "https://portal.example.com"
    assert trim_trailing_slash(None) == ""
    assert trim_trailing_slash("") == ""


def test_first_per_key_keeps_first_seen_row():
    rows = [
        SimpleNamespace(task_id=1, name="newest-1"),
        SimpleNamespace(task_id=2, name="newest-2"),
        SimpleNamespace(task_id=1, name="older-1"),
        SimpleNamespace(task_id=None, name="orphan"),
    ]
    out = first_per_key(rows, key=lambda r: r.task_id)
    assert set(out) == {1, 2}
    assert out[1].name == "newest-1"
    assert out[2].name == "newest-2"
