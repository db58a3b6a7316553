# -*- coding: utf-8 -*-
#
# This file is part of `textparts`, a library for reversible plain text structures
#
# Copyright © 2019-2020 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


r"""
Split text in a reversible way.

Python's :func:`re.split` returns the text of *all* capturing groups in the
pattern, so if an arbitrary pattern is given, it is impossible to know which
elements of the result are delimiters and which are not, and the original
text can't be reconstructed reliably.

:func:`split_with_delimiter` solves this: it returns the text between the
matches and the full text of each match, alternating, regardless of the groups
in the pattern::

    >>> import re
    >>> re.split(r'X+(Q?)', 'XQabXXcXQ')
    ['', 'Q', 'ab', '', 'c', 'Q', '']
    >>> split_with_delimiter('XQabXXcXQ', re.compile(r'X+(Q?)'))
    ['', 'XQ', 'ab', 'XX', 'c', 'XQ']
    >>> ''.join(_) == 'XQabXXcXQ'
    True

"""

import re


def compile_pattern(pattern):
    """Return a compiled regular expression for ``pattern``.

    A string is taken literally, like :meth:`str.split` does.

    """
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(re.escape(pattern))


def add_grouping(pattern):
    """Return a compiled pattern that encloses ``pattern`` in a capturing group."""
    if isinstance(pattern.pattern, bytes):
        return re.compile(b'(' + pattern.pattern + b')', pattern.flags)
    return re.compile('(' + pattern.pattern + ')', pattern.flags)


def split_with_delimiter(text, pattern):
    """Split text on pattern, keeping the delimiters.

    Returns a list of fragments: the text before the first match, the first
    match, the text between the first and second match, and so on.
    ``''.join(result)`` always equals ``text``.

    The text of the groups inside the pattern is not returned. An empty text
    returns an empty list, and if the last fragment would be empty (i.e. the
    text ends with a match), it is left out.

    The ``pattern`` may be a string (which is taken literally) or a compiled
    regular expression.

    """
    if not text:
        return []
    grouped = add_grouping(compile_pattern(pattern))
    fragments = grouped.split(text)
    if len(fragments) == 1:
        return fragments
    # re.split yields the text before each match plus every group, and the
    # outer group is the full delimiter
    period = grouped.groups + 1
    if period > 2:
        fragments = [f for i, f in enumerate(fragments) if i % period < 2]
    if not fragments[-1]:
        del fragments[-1]
    return fragments


def count_regexp(text, pattern, like_linenum=False, with_if_end=False):
    """Return the number of matches of pattern in text.

    If ``like_linenum`` is True, count like line numbers: one is added
    unless the text ends with a match; so text without matches counts as one.

    If ``with_if_end`` is True, a two-tuple(``count``, ``at_end``) is
    returned, where ``count`` is the number of matches and ``at_end`` is True
    if counting like line numbers would give the same result, i.e. when the
    text ends with a match.

    An empty text always returns 0 (or ``(0, True)``).

    """
    if not text:
        return (0, True) if with_if_end else 0
    size = len(split_with_delimiter(text, pattern))
    count = size // 2
    if with_if_end:
        return count, size % 2 == 0
    if like_linenum:
        return (size + 1) // 2
    return count


def count_lines(text, linebreak="\n"):
    r"""Return the number of lines in text.

    A line break at the very end does not start a new line::

        >>> count_lines("\nab\n\nc")
        4
        >>> count_lines("\nab\n\nc\n")
        4

    """
    if not text:
        return 0
    lines = text.split(linebreak)
    if not lines[-1]:
        del lines[-1]
    return len(lines)

