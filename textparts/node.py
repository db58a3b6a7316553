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
This module defines the :class:`Node` base class, that is shared by the
leaf text nodes (:class:`~.text.Paragraph`, :class:`~.text.Boundary`) and the
container node (:class:`~.part.Part`).

Nodes do not refer to their parent: a tree is owned by its root node, and a
nested node can be taken out and put in another tree without bookkeeping.

Instead of subclassing to mark special nodes (e.g. a title Paragraph), every
node has a :attr:`~Node.kind` attribute that can be set to a string. Kinds can
be used in the query operators, see :meth:`Node.__truediv__`.

"""

DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
}

DUMP_STYLE_DEFAULT = "round"


class Node:
    """Base class for all nodes.

    The query operators ``/`` and ``//`` expect a Node subclass, a tuple
    of classes, a Node instance or a kind string as argument:

    * The ``/`` operator iterates over the children that match::

        for p in part / Paragraph:
            # p is a Paragraph child of part

    * The ``//`` operator iterates over all descendants in document order::

        for p in part // "title":
            # p is a descendant with the kind "title"

    If a Node instance is given, the type must be the same and
    :meth:`equals` must return True.

    """
    __slots__ = ('kind',)   # a string or None, can be set freely

    def is_part(self):
        """Return True if this node can have child nodes."""
        return False

    def is_paragraph(self):
        """Return True if this node is a Paragraph."""
        return False

    def is_boundary(self):
        """Return True if this node is a Boundary."""
        return False

    def is_empty(self):
        """Return True if the node contains no text or no children."""
        raise NotImplementedError

    def join(self):
        """Return the text of this node (and its descendants)."""
        raise NotImplementedError

    def children(self):
        """Return the sequence of child nodes; leaf nodes return an empty tuple."""
        return ()

    def copy(self):
        """Return a copy of this node."""
        raise NotImplementedError

    def deepcopy(self):
        """Return a copy of this node that shares nothing with the original."""
        return self.copy()

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.deepcopy()

    def equals(self, other):
        """Return True if we and other are equivalent, stricter than ``==``.

        This is the case when we and the other have the same class, the same
        kind and :meth:`body_equals` returns True.

        """
        return type(self) is type(other) and self.kind == other.kind \
            and self.body_equals(other)

    def body_equals(self, other):
        """Implement this to compare the contents in :meth:`equals`."""
        return True

    def _get_predicate_iterator(self, other, source_iterator):
        """Return an iterator or NotImplemented.

        This is used by the ``/`` and ``//`` operators.

        """
        if isinstance(other, Node):
            predicate = lambda node: node.equals(other)
        elif isinstance(other, (tuple, type)):
            predicate = lambda node: isinstance(node, other)
        elif isinstance(other, str):
            predicate = lambda node: node.kind == other
        else:
            return NotImplemented
        return filter(predicate, source_iterator)

    def __truediv__(self, other):
        """Iterate over children that match."""
        return self._get_predicate_iterator(other, self.children())

    def __floordiv__(self, other):
        """Iterate over descendants that match, in document order."""
        return self._get_predicate_iterator(other, self.descendants())

    def descendants(self, reverse=False):
        """Iterate over all the descendants of this node.

        If ``reverse`` is set to True, yields all descendants in backward
        direction.

        When you :meth:`~generator.send` False to this generator, child nodes
        of the just yielded node will not be yielded.

        """
        iterate = reversed if reverse else iter
        stack = []
        gen = iterate(self.children())
        while True:
            for n in gen:
                if (yield n) is not False and n.children():
                    stack.append(gen)
                    gen = iterate(n.children())
                    break
            else:
                if stack:
                    gen = stack.pop()
                else:
                    break

    def dump(self, file=None, style=None):
        """Display a graphical representation of the node and its contents.

        The file object defaults to stdout, and the style to "round". The
        "ascii" style only uses ASCII characters.

        """
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        def lines(node, prefix):
            children = node.children()
            for n, child in enumerate(children, 1):
                last = n == len(children)
                yield prefix + d[2 + last] + repr(child)
                yield from lines(child, prefix + d[last])
        print(repr(self), file=file)
        for line in lines(self, ''):
            print(line, file=file)

