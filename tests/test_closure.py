import pytest

import logging

from rule_grammar.rules import parse_rules, UNRESOLVED

from rule_grammar.closure import (
    ClosureResult,
    close_rules,
    chain_matches,
    unknown_references,
    unresolved_dependencies,
)

from sample_grammars import SIMPLE_INPUT


SIMPLE_RULES = SIMPLE_INPUT.partition("\n\n")[0].splitlines()


class TestChainMatches(object):
    @pytest.fixture
    def rules(self):
        rules = parse_rules(["1: 4 | 5", '2: "x"', "3: 1 | 2"])
        rules[1].resolve(["a", "b"])
        rules[3].resolve(["a", "b", "x"])
        return rules

    def test_concatenation(self, rules):
        assert chain_matches(rules, [1, 2]) == set(["ax", "bx"])

    def test_order_respected(self, rules):
        assert chain_matches(rules, [2, 1]) == set(["xa", "xb"])

    def test_single(self, rules):
        assert chain_matches(rules, [1]) == set(["a", "b"])

    def test_product(self, rules):
        assert chain_matches(rules, [1, 3]) == set(
            ["aa", "ab", "ax", "ba", "bb", "bx"]
        )

    def test_duplicates_collapse(self, rules):
        assert chain_matches(rules, [2, 2, 2]) == set(["xxx"])


class TestCloseRules(object):
    def test_acyclic(self):
        rules = parse_rules(SIMPLE_RULES)
        result = close_rules(rules)

        assert result == ClosureResult(
            passes=3,
            resolved=frozenset(range(6)),
            stuck=frozenset(),
        )

        assert rules[2].matches == frozenset(["aa", "bb"])
        assert rules[3].matches == frozenset(["ab", "ba"])
        assert rules[1].matches == frozenset(
            ["aaab", "aaba", "bbab", "bbba", "abaa", "abbb", "baaa", "babb"]
        )
        assert len(rules[0].matches) == 8
        assert "ababbb" in rules[0].matches
        assert "abbbab" in rules[0].matches

    def test_end_to_end_example(self):
        rules = parse_rules(["0: 1 2", '1: "a"', '2: "b"'])
        result = close_rules(rules)
        assert result.stuck == frozenset()
        assert rules[0].matches == frozenset(["ab"])

    def test_literal_chains_union(self):
        rules = parse_rules(["0: 1 | 2 | 3", '1: "a"', '2: "b"', '3: "a"'])
        close_rules(rules)
        assert rules[0].matches == frozenset(["a", "b"])

    def test_only_terminals(self):
        rules = parse_rules(['1: "a"', '2: "b"'])
        assert close_rules(rules) == ClosureResult(
            passes=0,
            resolved=frozenset([1, 2]),
            stuck=frozenset(),
        )

    def test_empty(self):
        assert close_rules({}) == ClosureResult(0, frozenset(), frozenset())

    def test_idempotent(self):
        rules = parse_rules(SIMPLE_RULES)
        close_rules(rules)
        before = dict((rule_id, rule.matches) for rule_id, rule in rules.items())

        result = close_rules(rules)
        assert result.passes == 0
        assert result.stuck == frozenset()
        for rule_id, rule in rules.items():
            assert rule.matches is before[rule_id]

    def test_order_independent(self):
        forward = parse_rules(SIMPLE_RULES)
        backward = parse_rules(list(reversed(SIMPLE_RULES)))
        assert list(forward) != list(backward)

        assert close_rules(forward) == close_rules(backward)
        for rule_id in forward:
            assert forward[rule_id].matches == backward[rule_id].matches

    def test_pass_sees_only_previous_passes(self):
        # Rule 2 becomes resolvable only once rule 1 has been resolved, which
        # takes a pass of its own.
        rules = parse_rules(["1: 0 0", "2: 1 1", '0: "a"'])
        result = close_rules(rules)
        assert result.passes == 2
        assert rules[2].matches == frozenset(["aaaa"])

    def test_cycle_stalls(self, caplog):
        caplog.set_level(logging.INFO)
        rules = parse_rules(["0: 1 2", "1: 2 | 2 1", '2: "a"', '3: 2 2'])
        result = close_rules(rules)

        assert result.stuck == frozenset([0, 1])
        assert result.resolved == frozenset([2, 3])
        assert result.passes == 1
        assert rules[0].matches is UNRESOLVED
        assert rules[1].matches is UNRESOLVED
        assert rules[3].matches == frozenset(["aa"])

        assert "Closure stalled" in caplog.text

    def test_unknown_reference_stalls(self):
        rules = parse_rules(["0: 1 9", '1: "a"'])
        result = close_rules(rules)
        assert result.stuck == frozenset([0])

    def test_passes_logged(self, caplog):
        caplog.set_level(logging.DEBUG)
        close_rules(parse_rules(["0: 1 2", '1: "a"', '2: "b"']))
        assert "Closure pass 1 resolved rules [0]" in caplog.text


class TestUnknownReferences(object):
    def test_none(self):
        assert unknown_references(parse_rules(SIMPLE_RULES)) == {}

    def test_missing(self):
        rules = parse_rules(["0: 1 9 | 8", '1: "a"', "2: 1 | 7"])
        assert unknown_references(rules) == {
            0: set([8, 9]),
            2: set([7]),
        }


class TestUnresolvedDependencies(object):
    def test_resolved_root(self):
        rules = parse_rules(["0: 1", '1: "a"', "2: 2 1 | 1"])
        close_rules(rules)
        assert unresolved_dependencies(rules, 0) == set()

    def test_follows_unresolved_rules_only(self):
        rules = parse_rules(
            ["0: 1 3", "1: 2 | 2 1", '2: "a"', "3: 2", "4: 4 2 | 2", "5: 99"]
        )
        close_rules(rules)
        assert unresolved_dependencies(rules, 0) == set([0, 1])
        assert unresolved_dependencies(rules, 4) == set([4])
        assert unresolved_dependencies(rules, 5) == set([5])

    def test_missing_root(self):
        assert unresolved_dependencies({}, 0) == set()
