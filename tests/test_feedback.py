import pytest
from packages.engine import constraints_from_history, matches, parse_history_arg
from packages.engine.feedback import normalize_pattern


def test_single_row_green_yellow_gray():
    # answer "horse" scored against "crane"
    c = constraints_from_history([("crane", "-Y--G")])
    assert set(c.accepted_chars) == {"r", "e"}
    assert set(c.denied_chars) == {"c", "a", "n"}
    assert dict(c.known_positions) == {5: "e"}
    assert dict(c.rejected_positions) == {2: ("r",)}
    assert matches("horse", c) is True
    assert matches("crane", c) is False


def test_gray_duplicate_letter_is_not_denied():
    # answer "abide" scored against "speed": second 'e' is gray, but 'e' is present
    c = constraints_from_history([("speed", "--Y-Y")])
    assert "e" not in c.denied_chars
    assert set(c.denied_chars) == {"s", "p"}
    assert "e" in c.rejected_positions[4]
    assert matches("abide", c) is True


def test_gray_duplicate_with_green_elsewhere():
    # answer "abide" scored against "eerie"
    c = constraints_from_history([("eerie", "---YG")])
    assert "e" not in c.denied_chars
    assert c.denied_chars == ("r",)
    assert c.known_positions[5] == "e"
    assert "e" in c.rejected_positions[1] and "e" in c.rejected_positions[2]
    assert "e" not in c.rejected_positions.get(5, ())
    assert matches("abide", c) is True


def test_multiple_rows_and_skipped_rows():
    history = [("crane", "-Y--G"), ("", ""), ("abc", "G"), ("horse", "GGGGG")]
    c = constraints_from_history(history)
    assert dict(c.known_positions) == {1: "h", 2: "o", 3: "r", 4: "s", 5: "e"}
    assert matches("horse", c) is True


def test_pattern_aliases_and_errors():
    assert normalize_pattern("g.yb-") == "G-Y--"
    with pytest.raises(ValueError):
        normalize_pattern("GG")
    with pytest.raises(ValueError):
        normalize_pattern("GGXGG")
    with pytest.raises(ValueError):
        constraints_from_history([("crane", "GGG")])


def test_parse_history_arg():
    assert parse_history_arg("Crane:-y--g") == ("crane", "-Y--G")
    with pytest.raises(ValueError):
        parse_history_arg("crane")
    with pytest.raises(ValueError):
        parse_history_arg("cranes:-----")
