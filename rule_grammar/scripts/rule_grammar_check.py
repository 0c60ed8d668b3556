r"""
.. _rule-grammar-check:

``rule-grammar-check``
======================

A command-line utility which counts the candidate strings in an input file
matched by its grammar.

Usage
-----

This command should be passed a filename containing a rule block and a
candidate block separated by a blank line (see
:py:mod:`rule_grammar.input_format`). For example::

    $ rule-grammar-check path/to/input.txt
    Matched directly: 3
    Matched with recursive rules: 12

The first count gives the number of candidates matched by rule 0 of the
grammar as given. The second count gives the number matched once rules 8 and
11 are replaced by the self-referential rules::

    8: 42 | 42 8
    11: 42 31 | 42 11 31

Alternative replacement rules may be given using ``--override`` and the root
rule may be changed using ``--root``.

If the grammar or candidates can't be parsed, or the grammar contains
unsupported self-referential rules, an explanation is displayed::

    $ rule-grammar-check invalid.txt
    Closure stalled with rules 0 and 1 unresolved while matching against rule 0.

    These rules (directly or indirectly) refer to themselves. [...]

    rule-grammar-check: error: invalid grammar (see above)


Arguments
---------

The complete set of arguments can be listed using ``--help``

.. program-output:: rule-grammar-check --help

"""

import os
import sys
import logging
import traceback

from argparse import ArgumentParser

from rule_grammar import __version__

from rule_grammar.string_utils import wrap_paragraphs

from rule_grammar.exceptions import RuleGrammarError

from rule_grammar.rules import parse_rule

from rule_grammar.input_format import load, RECURSIVE_OVERRIDES

from rule_grammar.matching import count_matches, DEFAULT_ROOT_RULE


class GrammarChecker(object):
    def __init__(self, filename, root_id, overrides, verbose):
        """
        Parameters
        ==========
        filename : str
            The input filename to read from.
        root_id : int
            The rule candidates are matched against.
        overrides : [str, ...]
            Rule records substituted into the grammar for the second count.
        verbose : int
            If >=1, show Python stack traces on failure.
        """
        self._filename = filename
        self._root_id = root_id
        self._overrides = overrides
        self._verbose = verbose

    def run(self):
        try:
            with open(self._filename, "r") as f:
                text = f.read()
        except (IOError, OSError) as e:
            self._print_error(str(e))
            return 1

        try:
            rules, candidates = load(text)
            direct = count_matches(rules, candidates, self._root_id)
            print("Matched directly: {}".format(direct))

            rules, candidates = load(text, self._overrides)
            recursive = count_matches(rules, candidates, self._root_id)
            print("Matched with recursive rules: {}".format(recursive))
            return 0
        except RuleGrammarError as e:
            print(wrap_paragraphs(e.explain(), self._terminal_width()))
            self._print_error("invalid grammar (see above)")
            return 2
        except Exception as e:
            # Internal error (shouldn't happen(!))
            self._print_error(
                "internal error in grammar checker: {}: {} "
                "(probably a bug in this program)".format(
                    type(e).__name__,
                    str(e),
                )
            )
            return 3

    def _terminal_width(self):
        try:
            return os.get_terminal_size(sys.stdout.fileno()).columns
        except (AttributeError, ValueError, OSError):
            return 80

    def _print_error(self, message):
        """
        Print an error message to stderr.
        """
        # Avoid interleaving with stdout (and make causality clearer)
        sys.stdout.flush()

        if self._verbose >= 1:
            if sys.exc_info()[0] is not None:
                traceback.print_exc()

        prog = os.path.basename(sys.argv[0])
        message = "{}: error: {}".format(prog, message)
        sys.stderr.write("{}\n".format(message))


def parse_args(*args, **kwargs):
    """
    Parse a set of command line arguments. Returns a :py:mod:`argparse`
    ``args`` object with the following fields:

    * input (str): The filename of the input to read
    * root (int): The root rule id.
    * override ([str, ...]): The rule records to substitute.
    * verbose (int): The verbosity level.
    """
    parser = ArgumentParser(
        description="""
        Count the candidate strings in an input file matched by its grammar,
        both as given and with self-referential rule replacements.
    """
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    parser.add_argument(
        "input",
        help="""
            The filename of the rules and candidates to check.
        """,
    )

    parser.add_argument(
        "--root",
        "-r",
        type=int,
        default=DEFAULT_ROOT_RULE,
        help="""
            The id of the rule candidates must match. (Default: %(default)s).
        """,
    )

    parser.add_argument(
        "--override",
        "-o",
        action="append",
        metavar="RULE",
        help="""
            A rule record (e.g. '8: 42 | 42 8') which replaces the rule with
            the same id when computing the second count. May be given several
            times. If not given, the following overrides are used: {}.
        """.format(
            ", ".join("'{}'".format(o) for o in RECURSIVE_OVERRIDES)
        ),
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="""
            Show full Python stack-traces on failure. Give twice to also log
            the progress of rule closure.
        """,
    )

    args = parser.parse_args(*args, **kwargs)

    if args.override is None:
        args.override = list(RECURSIVE_OVERRIDES)

    for override in args.override:
        try:
            parse_rule(override)
        except RuleGrammarError as e:
            parser.error("invalid --override: {}".format(e))

    return args


def main(*args, **kwargs):
    args = parse_args(*args, **kwargs)

    if args.verbose >= 2:
        logging.basicConfig(level=logging.DEBUG)
    elif args.verbose >= 1:
        logging.basicConfig(level=logging.INFO)

    checker = GrammarChecker(
        filename=args.input,
        root_id=args.root,
        overrides=args.override,
        verbose=args.verbose,
    )
    return checker.run()


if __name__ == "__main__":
    sys.exit(main())
