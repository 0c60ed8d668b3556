"""
Exception types used in this library.

All exceptions raised due to problems with a grammar or its input derive from
:py:exc:`RuleGrammarError`. These provide an :py:meth:`~RuleGrammarError.explain`
method which returns a detailed, human readable description of the problem.

.. autoexception:: RuleGrammarError
    :members:

.. autoexception:: ParseError

.. autoexception:: UnknownReferenceError

.. autoexception:: UndefinedRootError

.. autoexception:: StalledClosureError

.. autoexception:: ChunkLengthError
"""

from rule_grammar.string_utils import wrap_paragraphs, ellipsise_lossy

__all__ = [
    "RuleGrammarError",
    "ParseError",
    "UnknownReferenceError",
    "UndefinedRootError",
    "StalledClosureError",
    "ChunkLengthError",
]


def format_ids(ids):
    """
    Format a collection of rule ids as a sorted, comma separated list, e.g.
    ``"0, 8 and 11"``.
    """
    ids = sorted(ids)
    if len(ids) <= 1:
        return ", ".join(map(str, ids))
    else:
        return "{} and {}".format(", ".join(map(str, ids[:-1])), ids[-1])


class RuleGrammarError(Exception):
    """
    Base class for all errors relating to a grammar or its input.
    """

    def __str__(self):
        return wrap_paragraphs(self.explain()).partition("\n")[0]

    def explain(self):
        """
        Produce a detailed human readable explanation of the problem.

        Should return a string which can be re-linewrapped by
        :py:func:`rule_grammar.string_utils.wrap_paragraphs`.

        The first paragraph will be used as a summary when the exception is
        printed using :py:func:`str`.
        """
        raise NotImplementedError()


class ParseError(RuleGrammarError, ValueError):
    """
    Thrown when a rule or candidate record does not follow the expected
    syntax.

    Parameters
    ==========
    line : str
        The offending line of input.
    reason : str
        A short description of what was wrong with the line.
    line_number : int or None
        If known, the (1-based) line number of the offending line.
    """

    def __init__(self, line, reason, line_number=None):
        self.line = line
        self.reason = reason
        self.line_number = line_number
        super(ParseError, self).__init__(line, reason, line_number)

    def explain(self):
        return """
            Could not parse {!r}{}: {}.

            Rules should be written as '<id>: "<literal>"' or as '<id>: <chain>
            | <chain> | ...' where each chain is a space separated list of rule
            ids. Candidates should be written one per line, without
            whitespace.
        """.format(
            ellipsise_lossy(self.line, 60),
            (
                " (line {})".format(self.line_number)
                if self.line_number is not None
                else ""
            ),
            self.reason,
        )


class UnknownReferenceError(RuleGrammarError):
    """
    Thrown when rules which could not be resolved refer to rule ids which do
    not exist.

    Parameters
    ==========
    references : {rule_id: set([missing_id, ...]), ...}
        For each rule with a dangling reference, the set of missing ids it
        refers to.
    """

    def __init__(self, references):
        self.references = references
        super(UnknownReferenceError, self).__init__(references)

    def explain(self):
        return """
            Rule{} {} refer{} to undefined rule{} {}.

            Rules which refer to undefined rules can never be resolved. Is the
            rule block complete?
        """.format(
            "s" if len(self.references) != 1 else "",
            format_ids(self.references),
            "s" if len(self.references) == 1 else "",
            "s" if len(self.missing_ids()) != 1 else "",
            format_ids(self.missing_ids()),
        )

    def missing_ids(self):
        """The set of all undefined rule ids referred to."""
        return set(
            missing_id
            for missing_ids in self.references.values()
            for missing_id in missing_ids
        )


class UndefinedRootError(UnknownReferenceError):
    """
    Thrown when the rule candidates are to be matched against does not exist.

    Parameters
    ==========
    root_id : int
        The id of the missing root rule.
    """

    def __init__(self, root_id):
        self.root_id = root_id
        super(UndefinedRootError, self).__init__({root_id: set([root_id])})

    def explain(self):
        return """
            Root rule {} is not defined.

            Candidates can only be matched against a rule defined in the rule
            block. Is the root rule id correct?
        """.format(
            self.root_id,
        )


class StalledClosureError(RuleGrammarError):
    """
    Thrown when rules required for matching could not be resolved and do not
    take the form of a supported repetition pattern.

    Parameters
    ==========
    stuck : iterable of rule ids
        The ids of the rules left unresolved.
    root_id : int or None
        The root rule matching was attempted against.
    """

    def __init__(self, stuck, root_id=None):
        self.stuck = tuple(sorted(stuck))
        self.root_id = root_id
        super(StalledClosureError, self).__init__(self.stuck, root_id)

    def explain(self):
        return """
            Closure stalled with rule{} {} unresolved{}.

            These rules (directly or indirectly) refer to themselves. The only
            self-referential shape supported is a root rule '<x> <y>' where
            '<x>' is '<a> | <a> <x>' and '<y>' is '<a> <b> | <a> <y> <b>'.
        """.format(
            "s" if len(self.stuck) != 1 else "",
            format_ids(self.stuck),
            (
                " while matching against rule {}".format(self.root_id)
                if self.root_id is not None
                else ""
            ),
        )


class ChunkLengthError(RuleGrammarError, ValueError):
    """
    Thrown when the rules used by a
    :py:class:`~rule_grammar.repetition.RepetitionMatcher` do not match
    strings of a single, uniform length.

    Parameters
    ==========
    lengths : set([int, ...])
        The distinct lengths of the strings matched.
    """

    def __init__(self, lengths):
        self.lengths = set(lengths)
        super(ChunkLengthError, self).__init__(self.lengths)

    def explain(self):
        if not self.lengths:
            return """
                Repeated rules must match at least one string.
            """
        return """
            Repeated rules match strings of length {} but must all match
            strings of one non-zero length.

            Repetitions are matched by cutting candidates into fixed size
            chunks which requires every string matched by both repeated rules
            to have the same length.
        """.format(
            format_ids(self.lengths).replace("and", "or"),
        )
