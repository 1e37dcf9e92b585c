from packages.engine import parse_constraints_from_body, parse_constraints_from_query


def test_parse_body_happy_path():
    body = {
        "acceptedChars": ["a"],
        "deniedChars": [],
        "knownPositions": {},
        "rejectedPositions": {},
    }
    c = parse_constraints_from_body(body)
    assert c is not None
    assert c.accepted_chars == ("a",)
    assert c.is_empty() is False


def test_parse_body_non_object_is_absent():
    for body in [None, "acceptedChars", 42, ["a", "b"], True]:
        assert parse_constraints_from_body(body) is None


def test_parse_body_empty_object_is_empty_constraints():
    assert parse_constraints_from_body({}).is_empty() is True


def test_parse_body_drops_invalid_entries():
    body = {
        "acceptedChars": ["C", "ab", 7, None, "t", "é"],
        "deniedChars": "rnes",  # not an array -> empty
        "knownPositions": {"1": "C", "0": "x", "6": "y", "two": "z", "3": "ab", "4": 5},
        "rejectedPositions": {"3": ["A", "bb", 1], "9": ["q"], "2": "x", "5": []},
    }
    c = parse_constraints_from_body(body)
    assert c.accepted_chars == ("c", "t")
    assert c.denied_chars == ()
    assert dict(c.known_positions) == {1: "c"}
    assert dict(c.rejected_positions) == {3: ("a",), 5: ()}


def test_parse_body_non_object_position_maps():
    c = parse_constraints_from_body({"knownPositions": ["c"], "rejectedPositions": None})
    assert dict(c.known_positions) == {}
    assert dict(c.rejected_positions) == {}


def test_parse_query_flat_strings():
    q = {
        "acceptedChars": "C, a ,t",
        "deniedChars": "r,n,e",
        "knownPositions": '{"1": "C", "4": "t"}',
        "rejectedPositions": '{"3": ["A"]}',
    }
    c = parse_constraints_from_query(q)
    assert c.accepted_chars == ("c", "a", "t")
    assert c.denied_chars == ("r", "n", "e")
    assert dict(c.known_positions) == {1: "c", 4: "t"}
    assert dict(c.rejected_positions) == {3: ("a",)}


def test_parse_query_never_absent():
    assert parse_constraints_from_query({}).is_empty() is True
    assert parse_constraints_from_query(None).is_empty() is True


def test_parse_query_drops_bad_values():
    q = {
        "acceptedChars": "a,,bc,1",
        "knownPositions": "{not json",
        "rejectedPositions": '{"7": ["a"], "2": "b", "1": ["X", "yy"]}',
    }
    c = parse_constraints_from_query(q)
    assert c.accepted_chars == ("a",)
    assert dict(c.known_positions) == {}
    assert dict(c.rejected_positions) == {1: ("x",)}


def test_parse_query_deeply_nested_json_is_dropped():
    q = {
        "acceptedChars": "a",
        "knownPositions": "[" * 100000,
        "rejectedPositions": '{"1": ' * 100000,
    }
    c = parse_constraints_from_query(q)
    assert c.accepted_chars == ("a",)
    assert dict(c.known_positions) == {}
    assert dict(c.rejected_positions) == {}
