"""
The :py:mod:`rule_grammar.rules` module defines the representation of a
single production rule along with the parser for rule records.

Rule records take one of two forms. A terminal rule gives a literal string in
double quotes::

    4: "a"

A non-terminal rule gives one or more *chains* of rule ids. Ids within a chain
are separated by single spaces and chains are separated by `` | ``. The rule
matches the concatenation of the strings matched by each rule in any one of
its chains::

    1: 2 3 | 3 2

A rule set is a :py:class:`dict` mapping rule ids to :py:class:`Rule` objects
and is produced by :py:func:`parse_rules`::

    >>> rules = parse_rules([
    ...     '0: 1 2',
    ...     '1: "a"',
    ...     '2: "b"',
    ... ])
    >>> rules[1].matches
    frozenset({'a'})
    >>> rules[0].matches
    <UNRESOLVED>

Non-terminal rules start out unresolved and have their match sets filled in by
:py:func:`rule_grammar.closure.close_rules`.

.. autoclass:: Rule
    :members:

.. autofunction:: parse_rule

.. autofunction:: parse_rules

.. autodata:: UNRESOLVED
"""

import re

from sentinels import Sentinel

from rule_grammar.exceptions import ParseError

__all__ = [
    "Rule",
    "UNRESOLVED",
    "parse_rule",
    "parse_rules",
]


UNRESOLVED = Sentinel("UNRESOLVED")
"""
The value of :py:attr:`Rule.matches` for a rule whose match set is not yet
known.
"""


RULE_ID_REGEX = re.compile(r"^[0-9]+$")
"""Matches a (non-negative, decimal) rule id."""


class Rule(object):
    """
    A single production rule.

    A rule is either terminal (it has no chains and matches only its literal)
    or a non-terminal (it matches the concatenation of the rules in any one of
    its chains). Terminal rules are resolved on construction; non-terminal
    rules are resolved by :py:func:`rule_grammar.closure.close_rules`.

    Parameters
    ==========
    rule_id : int
        The rule's (non-negative) id.
    chains : [[rule_id, ...], ...]
        The alternative chains of rule ids. Must be empty for terminal rules.
    literal : str or None
        For terminal rules, the string matched.
    """

    def __init__(self, rule_id, chains=(), literal=None):
        if (literal is None) == (len(chains) == 0):
            raise ValueError("A rule must have either chains or a literal.")

        self.id = rule_id
        self.chains = tuple(tuple(chain) for chain in chains)
        self.literal = literal

        if literal is not None:
            self._matches = frozenset([literal])
        else:
            self._matches = UNRESOLVED

    @property
    def is_terminal(self):
        return len(self.chains) == 0

    def is_resolved(self):
        """True once this rule's match set is final."""
        return self._matches is not UNRESOLVED

    @property
    def matches(self):
        """
        The :py:class:`frozenset` of strings this rule matches or
        :py:data:`UNRESOLVED` if this is not yet known.
        """
        return self._matches

    def references(self):
        """The set of rule ids referred to by any of this rule's chains."""
        return set(rule_id for chain in self.chains for rule_id in chain)

    def can_resolve(self, known_ids):
        """
        Return True if every rule referred to by this rule is in the
        'known_ids' collection of resolved rule ids.
        """
        return all(
            rule_id in known_ids for chain in self.chains for rule_id in chain
        )

    def resolve(self, matches):
        """
        Set the final match set of this (unresolved) rule. Used by the
        closure engine.
        """
        if self.is_resolved():
            raise ValueError("Rule {} is already resolved.".format(self.id))
        self._matches = frozenset(matches)

    def __repr__(self):
        return "<{} {}>".format(type(self).__name__, self)

    def __str__(self):
        if self.is_terminal:
            return '{}: "{}"'.format(self.id, self.literal)
        else:
            return "{}: {}".format(
                self.id,
                " | ".join(" ".join(map(str, chain)) for chain in self.chains),
            )


def parse_rule_id(text, line, line_number=None):
    if not RULE_ID_REGEX.match(text):
        raise ParseError(
            line,
            "{!r} is not a valid rule id".format(text),
            line_number,
        )
    return int(text)


def parse_rule(line, line_number=None):
    """
    Parse a single rule record (e.g. ``'1: 2 3 | 3 2'`` or ``'4: "a"'``) into
    a :py:class:`Rule`.

    Raises :py:exc:`~rule_grammar.exceptions.ParseError` if the record is
    malformed.
    """
    id_text, separator, body = line.strip().partition(": ")
    if not separator:
        raise ParseError(line, "expected '<id>: <rule>'", line_number)

    rule_id = parse_rule_id(id_text, line, line_number)

    if body.startswith('"'):
        literal = body.replace('"', "")
        if not literal:
            raise ParseError(line, "empty literal", line_number)
        return Rule(rule_id, literal=literal)

    chains = []
    chain_texts = []
    for chain_text in body.split("|"):
        if not chain_text.strip():
            raise ParseError(line, "empty chain", line_number)
        items = chain_text.split()
        chains.append([parse_rule_id(item, line, line_number) for item in items])
        chain_texts.append(" ".join(items))

    if " | ".join(chain_texts) != body:
        raise ParseError(
            line,
            "expected chains separated by ' | ' and ids separated by single spaces",
            line_number,
        )

    return Rule(rule_id, chains=chains)


def parse_rules(lines, first_line_number=1):
    """
    Parse an iterable of rule records into a rule set (a :py:class:`dict`
    mapping rule id to :py:class:`Rule`).

    Blank lines are ignored. A :py:exc:`~rule_grammar.exceptions.ParseError`
    is raised for malformed records or repeated rule ids, in which case no
    rule set is produced.
    """
    rules = {}
    for line_number, line in enumerate(lines, first_line_number):
        if not line.strip():
            continue

        rule = parse_rule(line, line_number)
        if rule.id in rules:
            raise ParseError(
                line,
                "rule {} is defined more than once".format(rule.id),
                line_number,
            )
        rules[rule.id] = rule

    return rules
