"""
The :py:mod:`rule_grammar.input_format` module reads the text format accepted
by :ref:`rule-grammar-check`.

An input consists of a block of rules (see :py:mod:`rule_grammar.rules`)
followed by a blank line and then a block of candidate strings, one per
line::

    0: 4 1 5
    1: 2 3 | 3 2
    2: 4 4 | 5 5
    3: 4 5 | 5 4
    4: "a"
    5: "b"

    ababbb
    bababa
    abbbab

Rules may be replaced before parsing using :py:func:`apply_overrides`. The
overrides in :py:data:`RECURSIVE_OVERRIDES` turn rules 8 and 11 into the
self-referential rules handled by :py:mod:`rule_grammar.repetition`.

.. autofunction:: load

.. autofunction:: split_sections

.. autofunction:: parse_candidates

.. autofunction:: apply_overrides

.. autodata:: RECURSIVE_OVERRIDES
"""

from rule_grammar.exceptions import ParseError

from rule_grammar.rules import parse_rule, parse_rules

from rule_grammar.closure import close_rules

__all__ = [
    "RECURSIVE_OVERRIDES",
    "load",
    "split_sections",
    "parse_candidates",
    "apply_overrides",
]


RECURSIVE_OVERRIDES = (
    "8: 42 | 42 8",
    "11: 42 31 | 42 11 31",
)
"""
Rule records which replace rules 8 and 11 with self-referential versions.
"""


def split_sections(text):
    """
    Split an input into its rule and candidate blocks at the first blank line.

    Returns a (rule_lines, candidate_lines) pair of lists of strings. Raises
    :py:exc:`~rule_grammar.exceptions.ParseError` if there is no blank line
    separating the two.
    """
    lines = text.splitlines()
    for index, line in enumerate(lines):
        if not line.strip():
            return (lines[:index], lines[index + 1 :])

    raise ParseError(
        lines[-1] if lines else "",
        "no blank line separating rules from candidates",
        len(lines) or None,
    )


def parse_candidates(lines, first_line_number=1):
    """
    Parse candidate strings, one per line. Trailing blank lines are ignored.

    Raises :py:exc:`~rule_grammar.exceptions.ParseError` for blank lines
    between candidates or candidates containing whitespace.
    """
    lines = list(lines)
    while lines and not lines[-1].strip():
        lines.pop()

    candidates = []
    for line_number, line in enumerate(lines, first_line_number):
        if not line.strip():
            raise ParseError(line, "empty candidate", line_number)
        if len(line.split()) != 1 or line != line.strip():
            raise ParseError(
                line,
                "candidates may not contain whitespace",
                line_number,
            )
        candidates.append(line)

    return candidates


def apply_overrides(rule_lines, overrides):
    """
    Replace rule records in 'rule_lines' with those in 'overrides' which have
    the same rule id. Overrides for rules not already present are appended.
    The replacement records are placed where the original appeared.
    """
    by_id = {}
    for line in overrides:
        by_id[parse_rule(line).id] = line

    out = []
    for line_number, line in enumerate(rule_lines, 1):
        if line.strip():
            rule_id = parse_rule(line, line_number).id
            if rule_id in by_id:
                line = by_id.pop(rule_id)
        out.append(line)

    out.extend(by_id.values())
    return out


def load(text, overrides=()):
    """
    Parse an input text into a rule set and list of candidates.

    The rule set will already have been closed (see
    :py:func:`rule_grammar.closure.close_rules`).

    Parameters
    ==========
    text : str
        The input text.
    overrides : [str, ...]
        Rule records replacing those in the input (see
        :py:func:`apply_overrides`).

    Returns
    =======
    rules : {rule_id: :py:class:`~rule_grammar.rules.Rule`, ...}
    candidates : [str, ...]
    """
    rule_lines, candidate_lines = split_sections(text)

    rules = parse_rules(apply_overrides(rule_lines, overrides))
    candidates = parse_candidates(candidate_lines, len(rule_lines) + 2)

    close_rules(rules)

    return (rules, candidates)
