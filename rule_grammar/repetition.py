"""
The :py:mod:`rule_grammar.repetition` module matches strings against a
self-referential rule which the closure engine (:py:mod:`rule_grammar.closure`)
cannot enumerate.

The supported shape is a root rule matching one-or-more repetitions of some
rule A, followed by one-or-more repetitions of some rule B, with strictly
fewer Bs than As. For example::

    0: 8 11
    8: 42 | 42 8
    11: 42 31 | 42 11 31

Here rule 8 matches ``42+`` and rule 11 matches ``42{n} 31{n}`` (for n >= 1),
giving rule 0 the language ``42{m} 31{n}`` for m > n >= 1.

When every string matched by A and B has the same length, L, a candidate can
be checked without enumerating this (infinite) language. The candidate is cut
into chunks of length L and read backwards: first a run of chunks matched by
B, followed by chunks which must all be matched by A::

    >>> m = RepetitionMatcher(a_matches={"aa", "bb"}, b_matches={"cc"})
    >>> m.match("aabbcc")  # aa bb | cc
    True
    >>> m.match("aacccc")  # aa | cc cc (too few As)
    False

:py:func:`find_repetition_pattern` identifies the rules playing the parts of
A and B in a rule set.

.. autoclass:: RepetitionMatcher
    :members:

.. autofunction:: find_repetition_pattern

.. autoclass:: RepetitionPattern

.. autofunction:: split_chunks
"""

import logging

from collections import namedtuple

from rule_grammar.exceptions import ChunkLengthError

__all__ = [
    "RepetitionMatcher",
    "RepetitionPattern",
    "find_repetition_pattern",
    "split_chunks",
]


RepetitionPattern = namedtuple("RepetitionPattern", "a,b,head,tail")
"""
The rules involved in a supported self-referential root rule.

Parameters
==========
a : int
    The id of the repeated rule (42 in the example above).
b : int
    The id of the trailing repeated rule (31 in the example above).
head : int
    The id of the rule matching one-or-more repetitions of A (8 above).
tail : int
    The id of the rule matching n repetitions of A followed by n of B (11
    above).
"""


def split_chunks(text, length):
    """Split 'text' into consecutive substrings 'length' characters long."""
    return [text[i : i + length] for i in range(0, len(text), length)]


class RepetitionMatcher(object):
    """
    Test whether strings consist of m strings matched by rule A followed by n
    strings matched by rule B, where m > n >= 1.

    Parameters
    ==========
    a_matches : set([str, ...])
        The match set of rule A.
    b_matches : set([str, ...])
        The match set of rule B.

    Raises
    ======
    ChunkLengthError
        If the strings in the two match sets are not all the same length.
    """

    def __init__(self, a_matches, b_matches):
        self.a_matches = frozenset(a_matches)
        self.b_matches = frozenset(b_matches)

        if not self.a_matches or not self.b_matches:
            raise ChunkLengthError(set())

        lengths = set(len(text) for text in self.a_matches | self.b_matches)
        if len(lengths) != 1 or 0 in lengths:
            raise ChunkLengthError(lengths)
        (self.chunk_length,) = lengths

    def count_chunks(self, text):
        """
        Classify the chunks of 'text'.

        Returns a (num_a, num_b) pair giving the number of leading chunks
        matched by A and trailing chunks matched by B. Returns None if the
        string can't be split this way.
        """
        if not text or len(text) % self.chunk_length != 0:
            return None

        chunks = split_chunks(text, self.chunk_length)

        num_b = 0
        for chunk in reversed(chunks):
            if chunk in self.b_matches:
                num_b += 1
            else:
                break

        num_a = len(chunks) - num_b
        if not all(chunk in self.a_matches for chunk in chunks[:num_a]):
            return None

        return (num_a, num_b)

    def match(self, text):
        """Return True if 'text' matches."""
        counts = self.count_chunks(text)
        if counts is None:
            return False
        num_a, num_b = counts
        return 1 <= num_b < num_a

    __call__ = match


def find_repetition_pattern(rules, root_id):
    """
    Determine whether the (unresolved) rule 'root_id' takes the form::

        <root>: <head> <tail>
        <head>: <a> | <a> <head>
        <tail>: <a> <b> | <a> <tail> <b>

    Where rules <a> and <b> have been resolved. The alternatives in <head> and
    <tail> may appear in either order.

    Returns a :py:class:`RepetitionPattern` or None if the rule does not take
    this form.
    """
    root = rules.get(root_id)
    if root is None or len(root.chains) != 1 or len(root.chains[0]) != 2:
        return None
    head_id, tail_id = root.chains[0]
    if head_id not in rules or tail_id not in rules or head_id == tail_id:
        return None

    head_chains = set(rules[head_id].chains)
    tail_chains = set(rules[tail_id].chains)
    if len(head_chains) != 2 or len(tail_chains) != 2:
        return None

    # Rule A is the sole member of the head's shortest chain
    shortest = min(head_chains, key=len)
    if len(shortest) != 1:
        return None
    (a_id,) = shortest
    if head_chains != set([(a_id,), (a_id, head_id)]):
        return None

    # Rule B is the last member of the tail's shortest chain
    shortest = min(tail_chains, key=len)
    if len(shortest) != 2 or shortest[0] != a_id:
        return None
    b_id = shortest[1]
    if tail_chains != set([(a_id, b_id), (a_id, tail_id, b_id)]):
        return None

    if (
        a_id not in rules
        or b_id not in rules
        or not rules[a_id].is_resolved()
        or not rules[b_id].is_resolved()
    ):
        return None

    logging.debug(
        "Rule %d repeats rule %d (via %d) then rule %d (via %d)",
        root_id,
        a_id,
        head_id,
        b_id,
        tail_id,
    )
    return RepetitionPattern(a=a_id, b=b_id, head=head_id, tail=tail_id)
