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
The exceptions raised by textparts.

All exceptions inherit from :class:`TextPartsError`, and also from the builtin
exception that describes the error best, so that code catching e.g.
:class:`IndexError` keeps working::

    TextPartsError
     ├╴StructuralError (ValueError)
     │  ╰╴NodeTypeError (TypeError)
     ├╴RangeError (IndexError)
     ├╴ConfigError (ValueError)
     ╰╴UnsupportedOperationError (AttributeError)

"""


class TextPartsError(Exception):
    """Base class for all textparts errors."""
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class StructuralError(TextPartsError, ValueError):
    """Raised when an operation would break the alternation of content and
    Boundary nodes in a :class:`~.part.Part`.

    For example, inserting an odd number of elements inside a Part, or
    requesting a range that starts at a Boundary.

    """


class NodeTypeError(StructuralError, TypeError):
    """Raised when a node of the wrong type is put at a position.

    Boundaries must be at odd indices, Paragraphs and Parts at even indices.

    """


class RangeError(TextPartsError, IndexError):
    """Raised when an index is outside the valid range."""


class ConfigError(TextPartsError, ValueError):
    """Raised on invalid option values, duplicate rule names, or when a frozen
    :class:`~.rule.ParseRule` is modified."""


class UnsupportedOperationError(TextPartsError, AttributeError):
    """Raised for list operations a Part can't support without breaking the
    parity of its elements, such as appending a single element."""

