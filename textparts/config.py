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


"""
Default values and the :class:`Options` that influence how text is stored in a
:class:`~.part.Part`.

Options are immutable. Instead of changing global state, create a modified
copy and hand it to the functions that accept an ``options`` argument::

    >>> from textparts.config import DEFAULT_OPTIONS
    >>> opts = DEFAULT_OPTIONS.create_updated(unicode_form=None)
    >>> part = textparts.parse(text, options=opts)

"""

import dataclasses
import re


#: The line breaks that are recognized by default.
LINEBREAKS = ("\r\n", "\n", "\r")

#: A regular expression alternation matching one of the :data:`LINEBREAKS`.
LINEBREAK_PATTERN = "(?:" + "|".join(map(re.escape, LINEBREAKS)) + ")"

#: A regular expression character class matching a blank, i.e. whitespace
#: that does not break a line.
BLANK = r"[^\S\n\r\f\v\x1c-\x1f\x85\u2028\u2029]"

#: The line break used when none is specified.
DEFAULT_LINEBREAK = "\n"

#: The default number of lines for :func:`~.lines.head` and :func:`~.lines.tail`.
DEFAULT_HEADTAIL_LINES = 10

#: The Unicode normalization forms accepted by :class:`Options`.
UNICODE_FORMS = ("NFC", "NFD", "NFKC", "NFKD")


@dataclasses.dataclass(frozen=True)
class Options:
    """Options that determine how text is normalized and stored.

    ``linebreak``
        the line break string (default ``"\\n"``)
    ``unicode_form``
        the Unicode normalization applied to text that is put in a
        Paragraph or Boundary (default ``"NFC"``); set to None to store all
        text unchanged, which is needed to reproduce text that is not in a
        normalized form
    ``compact``
        whether pairs of a None content and a None boundary are removed on
        construction (default True)
    ``compacter``
        whether pairs of an empty (or None) content and an empty (or None)
        boundary are removed on construction (default True)
    ``recursive``
        whether nested Parts are normalized as well (default True)

    """
    linebreak: str = DEFAULT_LINEBREAK
    unicode_form: str = "NFC"
    compact: bool = True
    compacter: bool = True
    recursive: bool = True

    def __post_init__(self):
        from .exceptions import ConfigError
        if self.unicode_form is not None and self.unicode_form not in UNICODE_FORMS:
            raise ConfigError("unknown unicode_form: {}".format(repr(self.unicode_form)))
        if not isinstance(self.linebreak, str) or not self.linebreak:
            raise ConfigError("linebreak must be a non-empty string")

    def create_updated(self, **kwargs):
        """Return a copy with the specified fields changed."""
        return dataclasses.replace(self, **kwargs)


#: The options used when none are specified. Never reassign this.
DEFAULT_OPTIONS = Options()

