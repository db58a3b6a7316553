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
The textparts module.

Parse a plain text into a tree of Paragraphs and Boundaries that can be
modified and joined to text again::

    >>> import textparts
    >>> part = textparts.parse("Title\\n\\nSome text.\\n")
    >>> part.paras
    [Paragraph('Title'), Paragraph('Some text.\\n')]
    >>> part.join()
    'Title\\n\\nSome text.\\n'

"""

from .pkginfo import version, version_string
from .config import Options, DEFAULT_OPTIONS
from .exceptions import (
    TextPartsError, StructuralError, NodeTypeError, RangeError, ConfigError,
    UnsupportedOperationError)
from .split import split_with_delimiter
from .rule import ParseRule, DEFAULT_RULE
from .text import Paragraph, Boundary
from .part import Part


__all__ = (
    'parse', 'version', 'version_string', 'Options', 'DEFAULT_OPTIONS',
    'TextPartsError', 'StructuralError', 'NodeTypeError', 'RangeError',
    'ConfigError', 'UnsupportedOperationError', 'split_with_delimiter',
    'ParseRule', 'DEFAULT_RULE', 'Paragraph', 'Boundary', 'Part',
)


def parse(text, rule=None, options=None):
    """Convenience function to parse text and return a :class:`~.part.Part`.

    The ``rule`` defaults to :data:`~.rule.DEFAULT_RULE`, which splits on
    two or more consecutive line breaks. See :meth:`.Part.parse`.

    """
    return Part.parse(text, rule, options)

