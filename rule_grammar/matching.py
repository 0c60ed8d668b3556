"""
The :py:mod:`rule_grammar.matching` module checks candidate strings against a
closed rule set (see :py:func:`rule_grammar.closure.close_rules`).

When the root rule was resolved, a candidate matches if it appears in the
root's match set. When the root rule could not be resolved but takes the
repetition shape described in :py:mod:`rule_grammar.repetition`, candidates
are checked by a :py:class:`~rule_grammar.repetition.RepetitionMatcher`
instead. Any other unresolved root is an error::

    >>> from rule_grammar.rules import parse_rules
    >>> from rule_grammar.closure import close_rules
    >>> rules = parse_rules(['0: 1 2', '1: "a"', '2: "b"'])
    >>> close_rules(rules).stuck
    frozenset()
    >>> count_matches(rules, ["ab", "ba"])
    1

None of the functions in this module modify the rule set.

.. autofunction:: make_checker

.. autofunction:: count_matches

.. autofunction:: matching_candidates

.. autodata:: DEFAULT_ROOT_RULE
"""

import logging

from rule_grammar.closure import unknown_references, unresolved_dependencies

from rule_grammar.repetition import RepetitionMatcher, find_repetition_pattern

from rule_grammar.exceptions import (
    StalledClosureError,
    UndefinedRootError,
    UnknownReferenceError,
)

__all__ = [
    "DEFAULT_ROOT_RULE",
    "make_checker",
    "count_matches",
    "matching_candidates",
]


DEFAULT_ROOT_RULE = 0
"""The id of the rule candidates are matched against by default."""


def make_checker(rules, root_id=DEFAULT_ROOT_RULE):
    """
    Return a function which takes a candidate string and returns True if it
    is matched by rule 'root_id'.

    Raises
    ======
    UndefinedRootError
        If the root rule doesn't exist.
    UnknownReferenceError
        If the root rule could not be resolved due to references to undefined
        rules.
    StalledClosureError
        If the root rule could not be resolved and does not take a supported
        self-referential form.
    """
    if root_id not in rules:
        raise UndefinedRootError(root_id)

    stuck = set(rule_id for rule_id, rule in rules.items() if not rule.is_resolved())

    root = rules[root_id]
    if root.is_resolved():
        if stuck:
            logging.warning(
                "Rules %s are unresolved but not required by rule %d",
                sorted(stuck),
                root_id,
            )
        return root.matches.__contains__

    pattern = find_repetition_pattern(rules, root_id)
    if pattern is not None:
        logging.info(
            "Matching rule %d as repetitions of rules %d and %d",
            root_id,
            pattern.a,
            pattern.b,
        )
        return RepetitionMatcher(
            rules[pattern.a].matches,
            rules[pattern.b].matches,
        ).match

    required = unresolved_dependencies(rules, root_id)
    dangling = dict(
        (rule_id, missing)
        for rule_id, missing in unknown_references(rules).items()
        if rule_id in required
    )
    if dangling:
        raise UnknownReferenceError(dangling)
    else:
        raise StalledClosureError(required, root_id)


def matching_candidates(rules, candidates, root_id=DEFAULT_ROOT_RULE):
    """
    Iterate over the candidates (in the order given) which are matched by rule
    'root_id'. See :py:func:`make_checker` for the exceptions raised.
    """
    check = make_checker(rules, root_id)
    for candidate in candidates:
        if check(candidate):
            yield candidate


def count_matches(rules, candidates, root_id=DEFAULT_ROOT_RULE):
    """
    Count the candidates matched by rule 'root_id'. See
    :py:func:`make_checker` for the exceptions raised.
    """
    return sum(1 for _ in matching_candidates(rules, candidates, root_id))
