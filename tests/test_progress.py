"""Tests for progress document normalization."""

import json

from verirun.kernel.progress import (
    ROOT_SHAPES,
    detect_progress_shape,
    get_progress_roots,
    parse_maybe_json,
)


class TestParseMaybeJson:
    """Tests for parse_maybe_json."""

    def test_parses_json_string(self):
        assert parse_maybe_json('{"a":1}') == {"a": 1}

    def test_invalid_json_returned_unchanged(self):
        assert parse_maybe_json("not json") == "not json"

    def test_non_strings_returned_as_is(self):
        obj = {"x": 42}
        assert parse_maybe_json(obj) is obj
        assert parse_maybe_json(None) is None
        assert parse_maybe_json(7) == 7


class TestGetProgressRoots:
    """Tests for get_progress_roots across envelope shapes."""

    def test_none_returns_empty(self):
        assert get_progress_roots(None) == []

    def test_rules_field(self, progress_tree):
        roots = get_progress_roots(progress_tree)
        assert len(roots) == 4
        assert roots[0]["name"] == "validation_pendingDepositRequest_canIncrease"

    def test_json_string_equivalent_to_object(self, progress_tree):
        assert get_progress_roots(json.dumps(progress_tree)) == get_progress_roots(progress_tree)

    def test_verification_progress_double_encoded(self, progress_tree):
        """Both the document and the verificationProgress value may be JSON strings."""
        document = json.dumps({"verificationProgress": json.dumps(progress_tree)})
        roots = get_progress_roots(document)
        assert [root["name"] for root in roots] == [
            "validation_pendingDepositRequest_canIncrease",
            "sanity_check",
            "verified_rule",
            "timeout_rule",
        ]

    def test_verification_progress_bare_list(self):
        document = {"verificationProgress": [{"name": "r1"}, {"name": "r2"}]}
        assert [root["name"] for root in get_progress_roots(document)] == ["r1", "r2"]

    def test_verification_progress_children(self):
        document = {"verificationProgress": {"children": {"name": "only"}}}
        assert get_progress_roots(document) == [{"name": "only"}]

    def test_verification_progress_unrecognized_falls_through(self):
        """An unusable verificationProgress does not hide a sibling rules field."""
        document = {"verificationProgress": "garbage", "rules": [{"name": "r1"}]}
        assert get_progress_roots(document) == [{"name": "r1"}]

    def test_scalar_rules_wrapped(self):
        assert get_progress_roots({"rules": {"name": "r1"}}) == [{"name": "r1"}]

    def test_bare_list(self):
        assert get_progress_roots([{"name": "r1"}]) == [{"name": "r1"}]

    def test_children_field(self):
        assert get_progress_roots({"children": [{"name": "c"}]}) == [{"name": "c"}]

    def test_rules_preferred_over_children(self):
        document = {"rules": [{"name": "r"}], "children": [{"name": "c"}]}
        assert get_progress_roots(document) == [{"name": "r"}]

    def test_empty_rules_list_is_a_match(self):
        assert get_progress_roots({"rules": [], "children": [{"name": "c"}]}) == []

    def test_unrecognized_shapes_return_empty(self):
        assert get_progress_roots({"something": "else"}) == []
        assert get_progress_roots("plain text") == []
        assert get_progress_roots(42) == []
        assert get_progress_roots({"rules": None}) == []


def test_detect_progress_shape():
    assert detect_progress_shape({"verificationProgress": "[]"}) == "verificationProgress"
    assert detect_progress_shape({"rules": []}) == "rules"
    assert detect_progress_shape([]) == "list"
    assert detect_progress_shape({"children": []}) == "children"
    assert detect_progress_shape({}) is None
    assert detect_progress_shape(None) is None


def test_shape_table_order():
    assert [rule.name for rule in ROOT_SHAPES] == ["verificationProgress", "rules", "list", "children"]
