"""
The :py:mod:`rule_grammar` module resolves small grammars of numbered
production rules into the exact sets of strings they generate, and checks
candidate strings against them.

Below we give a general overview of the design of the software.


Rules
-----

A grammar is written as one rule per line. Each rule has a numeric id followed
by either a quoted literal or one or more *chains* of other rule ids, separated
by ``|``::

    0: 4 1 5
    1: 2 3 | 3 2
    2: 4 4 | 5 5
    3: 4 5 | 5 4
    4: "a"
    5: "b"

These are parsed into :py:class:`~rule_grammar.rules.Rule` objects by
:py:mod:`rule_grammar.rules`. A collection of rules, indexed by id, is simply a
:py:class:`dict` and is referred to as a *rule set*.


Main components
---------------

The software consists of three main components:

* A closure engine (:py:mod:`rule_grammar.closure`) which computes, for every
  rule whose dependencies allow it, the complete set of strings that rule
  matches.
* A repetition matcher (:py:mod:`rule_grammar.repetition`) which handles the
  one kind of self-referential rule the closure engine cannot enumerate.
* A matching driver (:py:mod:`rule_grammar.matching`) which decides which of
  the above to use for a given root rule and counts matching candidates.

Input files, consisting of a rule block and a candidate block separated by a
blank line, are read by :py:mod:`rule_grammar.input_format` and the whole
process is exposed on the command line by the :ref:`rule-grammar-check`
command (:py:mod:`rule_grammar.scripts.rule_grammar_check`).


Closure
-------

Literal rules are known from the outset. Every other rule becomes known once
every rule it refers to is known, at which point its match set is the union,
over its chains, of every concatenation of one string from each referenced
rule. The closure engine repeatedly resolves all rules which have become
resolvable until either every rule is resolved or no further progress can be
made.

Rules which refer (directly or indirectly) to themselves can never be resolved
this way and so are left unresolved. The closure engine reports these rules
rather than failing since one particular shape of self-reference is handled
separately.


Self-referential rules
----------------------

The following pair of rules describe infinite languages::

    8: 42 | 42 8
    11: 42 31 | 42 11 31

When rule ``0: 8 11`` is used as the root, it matches one-or-more strings
matched by rule 42 followed by one-or-more strings matched by rule 31, with
strictly fewer of the latter. When every string matched by rules 42 and 31 has
the same length, membership can be decided by cutting the candidate into
fixed-size chunks and counting. This is performed by
:py:class:`~rule_grammar.repetition.RepetitionMatcher`.

Any other unresolvable shape results in a
:py:exc:`~rule_grammar.exceptions.StalledClosureError`.
"""

from rule_grammar.version import __version__
