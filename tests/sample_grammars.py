"""
Sample inputs (see :py:mod:`rule_grammar.input_format`) for use in this test
suite.
"""

SIMPLE_INPUT = """\
0: 4 1 5
1: 2 3 | 3 2
2: 4 4 | 5 5
3: 4 5 | 5 4
4: "a"
5: "b"

ababbb
bababa
abbbab
aaabbb
aaaabbb
"""
"""
A small acyclic grammar. Rule 0 matches 8 strings of length 6, of which the
candidates 'ababbb' and 'abbbab' are two.
"""


RECURSIVE_INPUT = """\
42: 9 14 | 10 1
9: 14 27 | 1 26
10: 23 14 | 28 1
1: "a"
11: 42 31
5: 1 14 | 15 1
19: 14 1 | 14 14
12: 24 14 | 19 1
16: 15 1 | 14 14
31: 14 17 | 1 13
6: 14 14 | 1 14
2: 1 24 | 14 4
0: 8 11
13: 14 3 | 1 12
15: 1 | 14
17: 14 2 | 1 7
23: 25 1 | 22 14
28: 16 1
4: 1 1
20: 14 14 | 1 15
3: 5 14 | 16 1
27: 1 6 | 14 18
14: "b"
21: 14 1 | 1 14
25: 1 1 | 1 14
22: 14 14
8: 42
26: 14 22 | 1 20
18: 15 15
7: 14 5 | 1 21
24: 14 1

abbbbbabbbaaaababbaabbbbabababbbabbbbbbabaaaa
bbabbbbaabaabba
babbbbaabbbbbabbbbbbaabaaabaaa
aaabbbbbbaaaabaababaabababbabaaabbababababaaa
bbbbbbbaaaabbbbaaabbabaaa
bbbababbbbaaaaaaaabbababaaababaabab
ababaaaaaabaaab
ababaaaaabbbaba
baabbaaaabbaaaababbaababb
abbbbabbbbaaaababbbbbbaaaababb
aaaaabbaabaaaaababaa
aaaabbaaaabbaaa
aaaabbaabbaaaaaaabbbabbbaaabbaabaaa
babaaabbbaaabaababbaabababaaab
aabbbbbaabbbaaaaaabbbbbababaaaaabbaaabba
"""
"""
A grammar where rules 42 and 31 both match strings of length 5. As given, 3
candidates match. With rules 8 and 11 replaced by self-referential versions,
12 candidates match.
"""


RECURSIVE_DIRECT_MATCHES = [
    "bbabbbbaabaabba",
    "ababaaaaaabaaab",
    "ababaaaaabbbaba",
]
"""The candidates in :py:data:`RECURSIVE_INPUT` matched without overrides."""


REPETITION_RULES = [
    "0: 8 11",
    "8: 42 | 42 8",
    "11: 42 31 | 42 11 31",
    "42: 1 1 | 2 2",
    "31: 3 3",
    '1: "a"',
    '2: "b"',
    '3: "c"',
]
"""
A self-referential grammar where rule 42 matches {'aa', 'bb'} and rule 31
matches {'cc'}.
"""
