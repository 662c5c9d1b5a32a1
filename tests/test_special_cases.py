"""
Tests for special case handling of raw author strings.
"""

import pytest

from contributors.rules import (
    CONNECTORS,
    LITERAL,
    SPECIAL_CASES,
    describe_special_cases,
    evaluate,
    extract_names,
    handle_special_cases,
    match_rule,
)

FALLBACK = "fallback"


class TestNoise:
    """Strings without an author return the fallback."""

    @pytest.mark.parametrize("name", [
        "42",
        "5684",
        "",
        "   ",
        "\t\n",
        "See rails ML for details",
        "fixture\nSee rails ML",
        "set RAILS_ENV to test",
        "RubyConf '05",
        "Includes duplicates of changes from 1.1.4 - 1.2.3",
        "update from Trac",
    ])
    def test_returns_fallback(self, name):
        assert handle_special_cases(name, FALLBACK) == FALLBACK

    def test_digits_with_text_are_not_noise(self):
        assert handle_special_cases("Rick 42", FALLBACK) == "Rick 42"

    def test_noise_literal_is_exact(self):
        assert handle_special_cases("Update from Trac", FALLBACK) == "Update from Trac"


class TestOverrides:
    """Exact literals fix typos and strip extra words."""

    @pytest.mark.parametrize("name,expected", [
        ("Marcel Mollina Jr.", "Marcel Molina Jr."),
        ("Thanks to Austin Ziegler for Transaction::Simple", "Austin Ziegler"),
        ("Hongli Lai (Phusion", "Hongli Lai (Phusion)"),
        ("Leon Bredt", "Leon Breedt"),
        ("After much pestering from Dave Thomas", "Dave Thomas"),
        ("=?utf-8?q?Adam=20Cig=C3=A1nek?=", "Adam Cigánek"),
    ])
    def test_override(self, name, expected):
        assert handle_special_cases(name, FALLBACK) == expected

    def test_override_is_case_sensitive(self):
        assert handle_special_cases("leon bredt", FALLBACK) == "leon bredt"


class TestMultiAuthor:
    """Bylines with several authors come back as ordered lists."""

    @pytest.mark.parametrize("name,expected", [
        ("Jim Remsik and Tim Pope", ["Jim Remsik", "Tim Pope"]),
        ("Jeremy Hopple and Kevin Clark", ["Jeremy Hopple", "Kevin Clark"]),
        ("Yehuda Katz and Carl Lerche", ["Yehuda Katz", "Carl Lerche"]),
        ("Ross Kaffenburger and Bryan Helmkamp", ["Ross Kaffenberger", "Bryan Helmkamp"]),
        ("nik.wakelin Koz", ["nik.wakelin", "Koz"]),
        ("doppler@gmail.com phil.ross@gmail.com", ["doppler@gmail.com", "phil.ross@gmail.com"]),
        ("me@jonnii.com rails@jeffcole.net Marcel Molina Jr.",
         ["me@jonnii.com", "rails@jeffcole.net", "Marcel Molina Jr."]),
    ])
    def test_literal(self, name, expected):
        assert handle_special_cases(name, FALLBACK) == expected

    def test_literal_result_is_a_fresh_list(self):
        first = handle_special_cases("Jim Remsik and Tim Pope", FALLBACK)
        first.append("Someone")
        assert handle_special_cases("Jim Remsik and Tim Pope", FALLBACK) == ["Jim Remsik", "Tim Pope"]

    @pytest.mark.parametrize("name,expected", [
        ("Kevin Clark & Jeremy Hopple", ["Kevin Clark", "Jeremy Hopple"]),
        ("Adam Milligan, Pratik", ["Adam Milligan", "Pratik"]),
        ("Rick Olson/Nicholas Seckar", ["Rick Olson", "Nicholas Seckar"]),
        ("Yehuda Katz + Carl Lerche", ["Yehuda Katz", "Carl Lerche"]),
        ("Sam Stephenson/?", ["Sam Stephenson"]),
        ("foamdino ~ at ~ gmail.com/others", ["foamdino ~ at ~ gmail.com"]),
        ("a, b & c", ["a", "b", "c"]),
    ])
    def test_connector_split(self, name, expected):
        assert handle_special_cases(name, FALLBACK) == expected

    def test_split_to_nothing_is_empty_list(self):
        assert handle_special_cases("others/?", FALLBACK) == []


class TestAttribution:
    """Attribution phrasing yields the trailing name."""

    @pytest.mark.parametrize("name,expected", [
        ("Suggested by Carl Youngblood", "Carl Youngblood"),
        ("Spotted by Kevin Bullock", "Kevin Bullock"),
        ("Investigation by Scott", "Scott"),
        ("earlier work by Michael Neumann", "Michael Neumann"),
        ("Aggregated by schoenm ~ at ~ earthlink.net", "schoenm ~ at ~ earthlink.net"),
        ("SUGGESTED  BY Carl Youngblood", "Carl Youngblood"),
        ("via Tim Bray", "Tim Bray"),
        ("Via  Tim Bray", "Tim Bray"),
    ])
    def test_captured_name(self, name, expected):
        assert handle_special_cases(name, FALLBACK) == expected

    def test_attribution_must_start_the_string(self):
        assert handle_special_cases("Bugs Spotted by Kevin", FALLBACK) == "Bugs Spotted by Kevin"

    def test_via_needs_whitespace(self):
        assert handle_special_cases("Vian Smith", FALLBACK) == "Vian Smith"


class TestRuleOrder:
    """The first matching rule wins."""

    def test_default_returns_input(self):
        assert handle_special_cases("David Heinemeier Hansson", FALLBACK) == "David Heinemeier Hansson"
        assert match_rule("David Heinemeier Hansson") is None

    def test_literal_beats_connector_split(self):
        """Every literal containing a connector is decided by its literal rule."""
        literals = [r for r in SPECIAL_CASES if r.kind == LITERAL]
        connector_rule = next(r for r in SPECIAL_CASES if r.kind == CONNECTORS)
        overlapping = [r for r in literals if connector_rule.match(r.pattern)]
        assert overlapping
        for rule in overlapping:
            assert match_rule(rule.pattern) is rule

    def test_literal_beats_attribution(self):
        assert handle_special_cases("Aredridel/earlier work by Michael Neumann", FALLBACK) == [
            "Aredridel",
            "Michael Neumann",
        ]

    def test_noise_beats_split(self):
        assert handle_special_cases("RubyConf '05, Denver", FALLBACK) == FALLBACK

    def test_evaluate_reports_deciding_rule(self):
        rule, result = evaluate("via Tim Bray", FALLBACK)
        assert rule.label == "via"
        assert result == "Tim Bray"

    def test_connector_rule_is_last(self):
        assert SPECIAL_CASES[-1].kind == CONNECTORS


class TestExtractNames:
    """The list form used by resolution."""

    def test_single_name_is_wrapped(self):
        assert extract_names("via Tim Bray", FALLBACK) == ["Tim Bray"]
        assert extract_names("42", FALLBACK) == [FALLBACK]

    def test_list_is_passed_through(self):
        assert extract_names("Jim Remsik and Tim Pope", FALLBACK) == ["Jim Remsik", "Tim Pope"]


class TestDescribe:
    def test_lists_rules_in_order(self):
        lines = describe_special_cases()
        assert len(lines) == len(SPECIAL_CASES)
        assert lines[0].startswith("1. digits:")
        assert "connectors" in lines[-1]
        assert any("'Leon Breedt'" in line for line in lines)

    def test_shows_regex_flags(self):
        lines = describe_special_cases()
        via = next(line for line in lines if " via: " in line)
        assert via.endswith("'\\\\Avia\\\\s+(.*)'/i -> group 1")
        assert "/a -> fallback" in lines[0]
