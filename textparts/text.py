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
The leaf nodes of a textparts tree.

A :class:`Paragraph` holds a piece of meaningful text, a :class:`Boundary` the
text between two paragraphs, mostly whitespace and line breaks.

Both own their text in the :attr:`~TextNode.text` attribute, which can be
changed. A leaf node compares equal to a string with the same text::

    >>> Paragraph("abc") == "abc"
    True
    >>> Paragraph("abc") == Boundary("abc")
    False

"""

from .node import Node


class TextNode(Node):
    """Base class for nodes that hold text.

    Unlike a :class:`~.part.Part`, a text node evaluates to False when its text
    is empty.

    """
    __slots__ = ('text',)

    def __init__(self, text="", kind=None):
        self.text = str(text)   #: The text of this node
        self.kind = kind

    def __repr__(self):
        kind = "[{}]".format(self.kind) if self.kind is not None else ""
        return "{}{}({})".format(type(self).__name__, kind, repr(self.text))

    def __str__(self):
        return self.text

    def __len__(self):
        return len(self.text)

    def __bool__(self):
        return bool(self.text)

    def __eq__(self, other):
        if isinstance(other, str):
            return self.text == other
        elif type(other) is type(self):
            return self.text == other.text
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    # text nodes are mutable
    __hash__ = None

    def is_empty(self):
        """Return True if the text is empty."""
        return not self.text

    def join(self):
        """Return the text."""
        return self.text

    def body_equals(self, other):
        """Compare the text."""
        return self.text == other.text

    def copy(self):
        """Return a new node of the same type and kind with the same text."""
        return type(self)(self.text, self.kind)

    def append_text(self, text):
        """Append text to our text, in place."""
        self.text += text


class Paragraph(TextNode):
    """A piece of meaningful text; at the even indices of a Part."""
    __slots__ = ()

    def is_paragraph(self):
        """Return True."""
        return True


class Boundary(TextNode):
    """The text between two paragraphs; at the odd indices of a Part."""
    __slots__ = ()

    def is_boundary(self):
        """Return True."""
        return True

