"""
The :py:mod:`rule_grammar.closure` module computes the match sets of the rules
in a rule set.

Closure proceeds in passes. In each pass, every unresolved rule whose chains
refer only to already resolved rules is resolved. Its match set is the union,
over its chains, of every concatenation of one string from each rule in the
chain (in chain order). For example, given::

    1: "a" | "b"   (matches {"a", "b"})
    2: "x"         (matches {"x"})
    0: 1 2 | 2

Rule 0's first chain contributes ``{"ax", "bx"}`` and its second contributes
``{"x"}``, giving ``{"ax", "bx", "x"}``.

All rules resolved within a pass see only the rules resolved before that pass
began, and so the outcome does not depend on the order rules are visited.

Passes continue until every rule is resolved or a pass makes no progress. The
latter occurs when some rules refer (directly or indirectly) to themselves, or
to rules which do not exist. These rules are left unresolved and are reported
in the returned :py:class:`ClosureResult` rather than raising an exception:
:py:mod:`rule_grammar.matching` decides whether they can be dealt with.

.. autofunction:: close_rules

.. autoclass:: ClosureResult

.. autofunction:: chain_matches

.. autofunction:: unknown_references

.. autofunction:: unresolved_dependencies
"""

import logging

from collections import namedtuple

__all__ = [
    "ClosureResult",
    "close_rules",
    "chain_matches",
    "unknown_references",
    "unresolved_dependencies",
]


ClosureResult = namedtuple("ClosureResult", "passes,resolved,stuck")
"""
The outcome of :py:func:`close_rules`.

Parameters
==========
passes : int
    The number of passes which resolved at least one rule.
resolved : frozenset([rule_id, ...])
    The ids of all resolved rules (including those resolved before closure
    began).
stuck : frozenset([rule_id, ...])
    The ids of rules which could not be resolved. Empty when closure was
    complete.
"""


def chain_matches(rules, chain):
    """
    Compute the set of strings matched by a chain of (resolved) rule ids.

    The result contains every concatenation of one string from the first
    rule's match set, followed by one from the second and so on.
    """
    texts = set([""])
    for rule_id in chain:
        texts = set(
            prefix + suffix for prefix in texts for suffix in rules[rule_id].matches
        )
    return texts


def resolved_ids(rules):
    return frozenset(rule_id for rule_id, rule in rules.items() if rule.is_resolved())


def close_rules(rules):
    """
    Resolve as many rules in the 'rules' dictionary as possible, in place.

    Returns a :py:class:`ClosureResult` describing which rules could not be
    resolved. Calling this function again on the same rule set has no effect.
    """
    passes = 0
    while True:
        known_ids = resolved_ids(rules)
        if len(known_ids) == len(rules):
            break

        resolvable = [
            rule
            for rule in rules.values()
            if not rule.is_resolved() and rule.can_resolve(known_ids)
        ]
        if not resolvable:
            logging.info(
                "Closure stalled after %d pass(es) with %d rule(s) unresolved: %s",
                passes,
                len(rules) - len(known_ids),
                sorted(set(rules) - known_ids),
            )
            break

        # All match sets are computed before any are stored so that no rule
        # observes another resolved in the same pass.
        new_matches = [
            (
                rule,
                set(
                    text
                    for chain in rule.chains
                    for text in chain_matches(rules, chain)
                ),
            )
            for rule in resolvable
        ]
        for rule, matches in new_matches:
            rule.resolve(matches)

        passes += 1
        logging.debug(
            "Closure pass %d resolved rules %s",
            passes,
            sorted(rule.id for rule in resolvable),
        )

    resolved = resolved_ids(rules)
    return ClosureResult(
        passes=passes,
        resolved=resolved,
        stuck=frozenset(rules) - resolved,
    )


def unknown_references(rules):
    """
    Find references to rule ids which do not exist in the rule set.

    Returns a :py:class:`dict` mapping the ids of the offending rules to the
    set of missing ids they refer to.
    """
    out = {}
    for rule_id, rule in rules.items():
        missing = rule.references() - set(rules)
        if missing:
            out[rule_id] = missing
    return out


def unresolved_dependencies(rules, root_id):
    """
    Find the unresolved rules which rule 'root_id' depends on, directly or
    indirectly, including 'root_id' itself if it is unresolved.

    References are only followed through unresolved rules which exist in the
    rule set. Resolved rules have no bearing on why the root is stuck.

    Returns a :py:class:`set` of rule ids.
    """
    out = set()
    to_visit = [root_id]
    while to_visit:
        rule_id = to_visit.pop()
        if rule_id in out or rule_id not in rules:
            continue
        rule = rules[rule_id]
        if rule.is_resolved():
            continue
        out.add(rule_id)
        to_visit.extend(rule.references())
    return out
