"""
Minor string formatting utility functions used when producing human readable
error messages.
"""

import re

from textwrap import dedent, wrap

__all__ = [
    "ellipsise_lossy",
    "split_into_paragraphs",
    "wrap_paragraphs",
]


def ellipsise_lossy(text, max_length=80):
    """
    Given a string which may not fit within a given line length, truncate the
    string by adding ellipses in the middle.
    """
    if len(text) <= max_length:
        return text
    else:
        before_length = (max_length - 3) // 2
        after_length = (max_length - 3) - before_length
        return "{}...{}".format(text[:before_length], text[-after_length:])


RE_BULLET = re.compile(r"^([*]\s+)(.*)$")


def split_into_paragraphs(text):
    """
    Deindent and split a multi-line string with hard line-wrapped paragraphs
    into blocks which can be line-wrapped independently.

    Paragraphs are separated by blank lines. Lines starting with an asterisk
    begin a new bullet point. Indented lines (relative to the surrounding
    paragraphs) are treated as pre-formatted and kept exactly as they are.

    Returns
    =======
    blocks : [(first_indent, rest_indent, text), ...]
        For each block, the indentation for its first line, the indentation of
        subsequent lines and the text (without newlines) to be wrapped. A
        ``("", "", "")`` block is inserted between paragraphs.
    """
    blocks = []
    previous_blank = True
    for line in dedent(text).splitlines():
        if line.strip() == "":
            previous_blank = True
            continue

        if previous_blank and blocks:
            blocks.append(("", "", ""))

        bullet_match = RE_BULLET.match(line)
        if line[:1].isspace():
            blocks.append((None, None, line.rstrip()))
        elif bullet_match:
            prefix, body = bullet_match.groups()
            blocks.append((prefix, " " * len(prefix), body.strip()))
        elif previous_blank or blocks[-1][0] is None:
            blocks.append(("", "", line.strip()))
        else:
            first_indent, rest_indent, body = blocks[-1]
            blocks[-1] = (first_indent, rest_indent, body + " " + line.strip())

        previous_blank = False

    return blocks


def wrap_paragraphs(text, width=None):
    """
    Re-line-wrap a string containing hard-line-wrapped paragraphs (see
    :py:func:`split_into_paragraphs`).

    If 'width' is None, assumes an infinite line width (i.e. each paragraph
    is placed on a single line).
    """
    out = []
    for first_indent, rest_indent, body in split_into_paragraphs(text):
        if first_indent is None:
            out.append(body)
        elif width is None or not body:
            out.append(first_indent + body)
        else:
            lines = wrap(body, max(width - len(first_indent), 1))
            out.append(
                first_indent + ("\n" + rest_indent).join(lines),
            )
    return "\n".join(out)
