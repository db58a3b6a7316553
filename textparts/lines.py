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
Helper functions that work on the lines of a text, like the Unix ``head``
and ``tail`` commands::

    >>> text = "Title\n===\n\nPara 1\nPara 2\n"
    >>> head(text, 2)
    'Title\n===\n'
    >>> tail(text, 2)
    'Para 1\nPara 2\n'
    >>> head(text, re.compile("=+"))
    'Title\n===\n'
    >>> tail(text, re.compile("=+"), inclusive=False)
    '\nPara 1\nPara 2\n'

The number of lines can also be given in characters (``unit="char"``) or
bytes (``unit="byte"``).

"""

import re

from parce.util import Dispatcher

from .config import BLANK, DEFAULT_HEADTAIL_LINES, DEFAULT_LINEBREAK, LINEBREAKS
from .exceptions import ConfigError


class Lines:
    """Extracts the head or tail of a text.

    ``linebreak`` is the line break to split lines on. If ``inclusive`` is
    True (the default), the line that matches a regular expression given as
    the number of lines is included in the result.

    The unit (``"line"``, ``"char"`` or ``"byte"``, and the aliases ``"-n"``
    and ``"-c"``) selects the method that handles a request.

    """
    def __init__(self, linebreak=DEFAULT_LINEBREAK, inclusive=True, encoding="utf-8"):
        self.linebreak = linebreak
        self.inclusive = inclusive
        self.encoding = encoding

    @Dispatcher
    def _head(self, unit, text, num):
        raise ConfigError("unknown unit: {}".format(repr(unit)))

    @Dispatcher
    def _tail(self, unit, text, num):
        raise ConfigError("unknown unit: {}".format(repr(unit)))

    def head(self, text, num=DEFAULT_HEADTAIL_LINES, unit="line"):
        """Return the first ``num`` units of text.

        For the "line" unit, ``num`` may be a compiled regular expression, in
        which case the text up to the first line that matches is returned.
        For the "byte" unit, bytes are returned.

        """
        if isinstance(num, re.Pattern):
            if unit not in ("line", "-n"):
                raise TypeError("a regular expression can only be used for lines")
        elif num < 1:
            raise ConfigError("the number for head must be positive, not {}".format(num))
        return self._head(unit, text, num)

    def tail(self, text, num=DEFAULT_HEADTAIL_LINES, unit="line"):
        """Return the last ``num`` units of text.

        A negative ``num`` counts from the head: ``tail(text, -3)`` returns the
        text starting at the third unit, like ``tail -n +3``. For the "line"
        unit, ``num`` may be a compiled regular expression, in which case the
        text from the first line that matches is returned. For the "byte"
        unit, bytes are returned.

        """
        if isinstance(num, re.Pattern):
            if unit not in ("line", "-n"):
                raise TypeError("a regular expression can only be used for lines")
        elif num == 0:
            raise ConfigError("the number for tail must not be 0")
        return self._tail(unit, text, num)

    @_head("line")
    @_head("-n")
    def _head_lines(self, text, num):
        if isinstance(num, re.Pattern):
            return self._head_regexp(text, num)
        lb = self.linebreak
        result = lb.join(text.split(lb)[:num])
        return result if len(result) >= len(text) else result + lb

    @_head("char")
    def _head_chars(self, text, num):
        return text[:num]

    @_head("byte")
    @_head("-c")
    def _head_bytes(self, text, num):
        return text.encode(self.encoding)[:num]

    @_tail("line")
    @_tail("-n")
    def _tail_lines(self, text, num):
        if isinstance(num, re.Pattern):
            return self._tail_regexp(text, num)
        if not text:
            return ""
        lb = self.linebreak
        lines = text.split(lb)
        if num > 0:
            # a final line break does not start a new line
            if text.endswith(lb):
                num += 1
            return lb.join(lines[-num:])
        return lb.join(lines[-num-1:])

    @_tail("char")
    def _tail_chars(self, text, num):
        return text[-num:] if num > 0 else text[-num-1:]

    @_tail("byte")
    @_tail("-c")
    def _tail_bytes(self, text, num):
        data = text.encode(self.encoding)
        return data[-num:] if num > 0 else data[-num-1:]

    def _head_regexp(self, text, pattern):
        """Return the text up to the first line matching pattern.

        The whole text is returned if there is no match.

        """
        m = pattern.search(text)
        if not m:
            return text
        lb = self.linebreak
        if self.inclusive:
            if m.group().endswith(lb):
                return text[:m.end()]
            end = text.find(lb, m.end())
            return text if end == -1 else text[:end+len(lb)]
        start = text.rfind(lb, 0, m.start())
        return "" if start == -1 else text[:start+len(lb)]

    def _tail_regexp(self, text, pattern):
        """Return the text from the first line matching pattern.

        The whole text is returned if there is no match.

        """
        m = pattern.search(text)
        if not m:
            return text
        lb = self.linebreak
        if self.inclusive:
            start = text.rfind(lb, 0, m.start())
            return text if start == -1 else text[start+len(lb):]
        if m.group().endswith(lb):
            return text[m.end():]
        end = text.find(lb, m.end())
        return "" if end == -1 else text[end+len(lb):]


def head(text, num=DEFAULT_HEADTAIL_LINES, unit="line", inclusive=True, linebreak=DEFAULT_LINEBREAK):
    """Return the first ``num`` lines (or other units) of text, see :meth:`Lines.head`."""
    return Lines(linebreak, inclusive).head(text, num, unit)


def tail(text, num=DEFAULT_HEADTAIL_LINES, unit="line", inclusive=True, linebreak=DEFAULT_LINEBREAK):
    """Return the last ``num`` lines (or other units) of text, see :meth:`Lines.tail`."""
    return Lines(linebreak, inclusive).tail(text, num, unit)


def _rest(text, part, from_end):
    """Return the part of text not covered by part (which is at the start, or
    at the end if ``from_end`` is True)."""
    if isinstance(part, bytes):
        text = text.encode("utf-8")
    if len(part) >= len(text):
        return text[:0]
    return text[:len(text)-len(part)] if from_end else text[len(part):]


def head_inverse(text, *args, **kwargs):
    """Return the text that :func:`head` with the same arguments leaves out."""
    return _rest(text, head(text, *args, **kwargs), False)


def tail_inverse(text, *args, **kwargs):
    """Return the text that :func:`tail` with the same arguments leaves out."""
    return _rest(text, tail(text, *args, **kwargs), True)


def normalize_linebreaks(text, repl=DEFAULT_LINEBREAK, linebreaks=LINEBREAKS):
    r"""Return text with all ``linebreaks`` replaced with ``repl``.

    The longest line breaks should come first::

        >>> normalize_linebreaks("a\r\nb\rc\n")
        'a\nb\nc\n'

    """
    pattern = '|'.join(map(re.escape, linebreaks))
    return re.sub(pattern, lambda m: repl, text)


def strip_at_lines(text, strip_head=True, strip_tail=True, markdown=False, linebreak=DEFAULT_LINEBREAK):
    """Return text with the blanks at the start and/or end of every line removed.

    If ``markdown`` is True, the head of the lines is never stripped (as
    indentation is significant) and two blanks at the end of a line (a line
    break in Markdown) are kept.

    """
    lb = re.escape(linebreak)
    if strip_head and not markdown:
        text = re.sub(r'(\A|{}){}+'.format(lb, BLANK), r'\1', text)
    if strip_tail:
        if markdown:
            text = re.sub(r'(?<!{0}){0}{{3,}}({1}|\Z)'.format(BLANK, lb), r'\1', text)
            text = re.sub(r'(?<!{0}){0}({1}|\Z)'.format(BLANK, lb), r'\1', text)
        else:
            text = re.sub(r'(?<!{0}){0}+({1}|\Z)'.format(BLANK, lb), r'\1', text)
    return text

