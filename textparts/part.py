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
The :class:`Part` is the container node of a textparts tree.

A Part always has an even number of elements, alternating a content node (a
:class:`~.text.Paragraph` or a nested Part) at the even indices and a
:class:`~.text.Boundary` at the odd indices::

    >>> p = Part.parse("Title\n\nFirst para.\nSecond line.\n\n")
    >>> p.dump()
    <Part (4 children)>
     ├╴Paragraph('Title')
     ├╴Boundary('\n\n')
     ├╴Paragraph('First para.\nSecond line.')
     ╰╴Boundary('\n\n')
    >>> p.join() == "Title\n\nFirst para.\nSecond line.\n\n"
    True

Strings, None and lists are converted to the right node type when they are put
in a Part. Operations that would break the alternation are refused: they raise
a :exc:`~.exceptions.StructuralError` and leave the Part unmodified.

"""

import logging
import unicodedata

from .config import DEFAULT_OPTIONS
from .exceptions import (
    NodeTypeError, RangeError, StructuralError, UnsupportedOperationError)
from .node import Node
from .rule import DEFAULT_RULE, ParseRule
from .text import Boundary, Paragraph
from .util import clip_count, positive_index, positive_index_checked


logger = logging.getLogger(__name__)


def _is_empty(item):
    """Return True if item is None or an empty string, node or list."""
    if item is None:
        return True
    elif isinstance(item, Node):
        return item.is_empty()
    return not item


def _compact(items, compacter):
    """Return the list of items with the empty content/boundary pairs removed.

    A pair is removed if both are None, or, if ``compacter`` is True, if both
    are empty.

    """
    result = []
    for i in range(0, len(items) - 1, 2):
        para, boundary = items[i], items[i + 1]
        if para is None and boundary is None:
            continue
        elif compacter and _is_empty(para) and _is_empty(boundary):
            continue
        result.extend((para, boundary))
    if len(items) % 2:
        result.append(items[-1])
    return result


class Part(Node):
    """A list of alternating content and Boundary nodes.

    ``elements`` is a sequence of strings, None, lists or nodes. If
    ``boundaries`` is given, ``elements`` are the content elements, and
    ``boundaries`` the Boundaries that follow them; a missing Boundary is
    empty.

    The ``options`` (see :class:`~.config.Options`) determine how the
    elements are normalized. The keyword arguments ``recursive``, ``compact``
    and ``compacter`` override the options of the same name for the
    construction only.

    A Part supports most list operations, but only those that can keep the
    alternation intact. Unlike Python's list, a Part always evaluates to True,
    use :meth:`is_empty` to test whether it has elements.

    """
    __slots__ = ('_elements', 'options')

    def __init__(self, elements=(), boundaries=None, *, kind=None, options=None,
                 recursive=None, compact=None, compacter=None):
        if isinstance(elements, (str, bytes)):
            raise TypeError("Part needs a sequence, use Part.parse() to parse text")
        self.kind = kind
        self.options = options or DEFAULT_OPTIONS
        if boundaries is None:
            items = list(elements)
        else:
            boundaries = list(boundaries)
            items = []
            for i, para in enumerate(elements):
                items.append(para)
                items.append(boundaries[i] if i < len(boundaries) and boundaries[i] is not None else "")
        self._elements = self._normalized(items, recursive, compact, compacter)

    @classmethod
    def parse(cls, text, rule=None, options=None, kind=None):
        """Parse text with the rule and return a Part.

        The rule defaults to :data:`~.rule.DEFAULT_RULE`; a regular expression
        or a callable is turned into a :class:`~.rule.ParseRule`.

        """
        if rule is None:
            rule = DEFAULT_RULE
        elif not isinstance(rule, ParseRule):
            rule = ParseRule(rule)
        result = rule.apply(text)
        if isinstance(result, str):
            result = [result]
        return cls(result, kind=kind, options=options)

    def _new(self, elements):
        """Return a new Part of our type, kind and options, without compacting."""
        return type(self)(elements, kind=self.kind, options=self.options, compact=False, compacter=False)

    def __repr__(self):
        kind = "[{}]".format(self.kind) if self.kind is not None else ""
        return '<{}{} ({} children)>'.format(type(self).__name__, kind, len(self))

    ## normalization

    def _unicode(self, text):
        """Return text in the configured Unicode normal form."""
        form = self.options.unicode_form
        if form is None or unicodedata.is_normalized(form, text):
            return text
        return unicodedata.normalize(form, text)

    def _coerce(self, item, index, recursive, fresh=None):
        """Return a node for item, suitable for the position ``index``.

        If ``fresh`` is a (compact, compacter) tuple and ``recursive`` is True,
        a nested Part is replaced with a normalized copy, otherwise it is
        normalized in place without compacting.

        """
        para = index % 2 == 0
        if isinstance(item, Part):
            if not para:
                raise NodeTypeError("a Part can't be at an odd index ({})".format(index))
            if recursive:
                if fresh:
                    return item.normalize(True, *fresh)
                item._renormalize()
            return item
        elif isinstance(item, (list, tuple)):
            if not para:
                raise NodeTypeError("a list can't be at an odd index ({})".format(index))
            return Part(item, options=self.options)
        elif isinstance(item, Boundary):
            if para:
                raise NodeTypeError("a Boundary can't be at an even index ({})".format(index))
        elif isinstance(item, Paragraph):
            if not para:
                raise NodeTypeError("a Paragraph can't be at an odd index ({})".format(index))
        elif item is None or isinstance(item, str):
            return (Paragraph if para else Boundary)(self._unicode(item or ""))
        else:
            raise NodeTypeError("unrecognized element at index {}: {}".format(index, repr(item)))
        text = self._unicode(item.text)
        return item if text == item.text else type(item)(text, item.kind)

    def _normalized(self, items, recursive=None, compact=None, compacter=None, fresh=False):
        """Return a new list with the normalized items.

        If ``fresh`` is True, nested Parts are replaced with normalized copies
        (when ``recursive``).

        Raises a :exc:`~.exceptions.NodeTypeError` if an item can't be put at
        its position.

        """
        opts = self.options
        if recursive is None:
            recursive = opts.recursive
        if compact is None:
            compact = opts.compact
        if compacter is None:
            compacter = opts.compacter
        if compact or compacter:
            items = _compact(items, compacter)
        nested = (compact, compacter) if fresh else None
        result = [self._coerce(item, index, recursive, nested) for index, item in enumerate(items)]
        if len(result) % 2:
            result.append(Boundary(""))
        return result

    def _renormalize(self):
        """Normalize in place after a modification, without compacting."""
        self._elements = self._normalized(self._elements, compact=False, compacter=False)

    def normalize(self, recursive=None, compact=None, compacter=None):
        """Return a normalized copy of this Part.

        Empty pairs are removed (depending on ``compact`` and ``compacter``),
        strings and None are converted to Paragraph or Boundary, lists to
        nested Parts, and an empty Boundary is added if the number of
        elements is odd. The arguments default to the :attr:`options`.

        If ``recursive`` is True, nested Parts are replaced with normalized
        copies, so this Part is left unchanged.

        """
        return self.copy().normalize_inplace(recursive, compact, compacter)

    def normalize_inplace(self, recursive=None, compact=None, compacter=None):
        """Normalize this Part in place and return it.

        Nested Parts are replaced with normalized copies, see :meth:`normalize`.

        """
        self._elements = self._normalized(self._elements, recursive, compact, compacter, True)
        return self

    ## reading

    def __len__(self):
        return len(self._elements)

    def __bool__(self):
        return True

    def __iter__(self):
        return iter(self._elements)

    def __reversed__(self):
        return reversed(self._elements)

    def __contains__(self, item):
        return item in self._elements

    def children(self):
        """Return the list of our elements.

        This is the list used internally, do not modify it.

        """
        return self._elements

    def to_list(self):
        """Return a (shallow) list of our elements."""
        return list(self._elements)

    def is_part(self):
        """Return True."""
        return True

    def is_empty(self):
        """Return True if this Part has no elements."""
        return not self._elements

    def join(self):
        """Return the text of all nodes, the inverse of :meth:`parse`."""
        return ''.join(n.join() for n in self._elements)

    __str__ = join

    @property
    def paras(self):
        """The list of content nodes (at the even indices)."""
        return self._elements[::2]

    parts = paras

    @property
    def boundaries(self):
        """The list of Boundaries (at the odd indices)."""
        return self._elements[1::2]

    def first_significant_index(self):
        """Return the index of the first non-empty element.

        Returns the last index if all elements are empty, and None if there
        are no elements.

        """
        if not self._elements:
            return None
        for i, n in enumerate(self._elements):
            if not n.is_empty():
                return i
        return len(self._elements) - 1

    def last_significant_index(self):
        """Return the index of the last non-empty element.

        Returns 0 if all elements are empty, and None if there are no
        elements.

        """
        if not self._elements:
            return None
        for i in range(len(self._elements) - 1, -1, -1):
            if not self._elements[i].is_empty():
                return i
        return 0

    def first_significant_element(self):
        """Return the first non-empty element, see :meth:`first_significant_index`."""
        i = self.first_significant_index()
        return None if i is None else self._elements[i]

    def last_significant_element(self):
        """Return the last non-empty element, see :meth:`last_significant_index`."""
        i = self.last_significant_index()
        return None if i is None else self._elements[i]

    def index_para(self, index):
        """Return True if index points to a content node, False for a Boundary.

        Raises a :exc:`~.exceptions.RangeError` if a negative index is too
        small.

        """
        return positive_index_checked(index, len(self._elements)) % 2 == 0

    def _slice_range(self, key):
        """Return the non-negative (start, stop) for a slice, or None."""
        if key.step not in (None, 1):
            raise ValueError("can't use step other than 1 in slice")
        size = len(self._elements)
        start = 0 if key.start is None else positive_index(key.start, size)
        if start is None:
            return None
        stop = size if key.stop is None else positive_index(key.stop, size)
        return start, (stop or 0)

    def _check_range(self, start, count):
        """Raise StructuralError if the range does not start at a content
        node or has an odd length."""
        if start % 2:
            raise StructuralError("range must start at an even index, not {}".format(start))
        elif count % 2:
            raise StructuralError("range must have an even number of elements, not {}".format(count))

    def __getitem__(self, key):
        """Return the element at an index or a Part for a slice.

        An index out of range returns None. A slice must start at an even
        index and select an even number of elements; a slice starting at or
        after the end returns an empty Part.

        """
        if isinstance(key, slice):
            r = self._slice_range(key)
            if r is None:
                return None
            start, stop = r
            count = clip_count(start, stop, len(self._elements))
            if count:
                self._check_range(start, count)
            return self._new(self._elements[start:start+count])
        try:
            return self._elements[key]
        except IndexError:
            return None

    def boundary_extended_at(self, index):
        """Return the list of Boundaries that end at the Boundary at index.

        If the content before the Boundary is a Part, its trailing Boundaries
        (recursively) precede the one at index, because their texts are
        adjacent. Returns None if the index is beyond the end.

        """
        pos = positive_index_checked(index, len(self._elements))
        if pos % 2 == 0:
            raise StructuralError("index {} is not at a Boundary".format(index))
        elif pos >= len(self._elements):
            return None
        prev = self._elements[pos - 1]
        result = prev.boundary_extended_at(-1) if prev.is_part() and not prev.is_empty() else []
        result.append(self._elements[pos])
        return result

    ## modification

    def insert(self, index, *elements):
        """Insert the elements before index and return self.

        Inside the Part, an even number of elements must be inserted. If the
        index is beyond the end, the gap is filled with empty elements.
        Raises a :exc:`~.exceptions.NodeTypeError` if an element would end
        up at the wrong position.

        """
        size = len(self._elements)
        pos = positive_index_checked(index, size)
        if pos <= size:
            if len(elements) % 2:
                raise StructuralError("can't insert an odd number of elements ({}) at {}".format(
                    len(elements), index))
            new = list(elements)
        else:
            new = [""] * (pos - size) + list(elements)
            pos = size
        if new:
            self._elements = self._normalized(
                self._elements[:pos] + new + self._elements[pos:], compact=False, compacter=False)
        return self

    def extend(self, elements):
        """Add the elements at the end, see :meth:`insert`."""
        return self.insert(len(self._elements), *elements)

    def take(self, start=0, stop=None):
        """Remove the elements from ``start`` upto ``stop`` and return them
        in a Part.

        ``start`` must be even and an even number of elements must be
        removed. Returns None if start is out of range.

        """
        r = self._slice_range(slice(start, stop))
        if r is None or r[0] >= len(self._elements):
            return None
        start, stop = r
        count = clip_count(start, stop, len(self._elements))
        if count:
            self._check_range(start, count)
        removed = self._elements[start:start+count]
        del self._elements[start:start+count]
        return self._new(removed)

    def __delitem__(self, key):
        if not isinstance(key, slice):
            raise UnsupportedOperationError("can't delete a single element, use a slice or take()")
        if key.step not in (None, 1):
            raise ValueError("can't use step other than 1 in slice")
        self.take(key.start or 0, key.stop)

    def __setitem__(self, key, value):
        """Replace an element or a slice.

        When replacing a slice, the number of new elements must be even if
        the number of replaced elements is even, and odd if it is odd. If the
        slice starts after the end, the values are inserted.

        """
        size = len(self._elements)
        if not isinstance(key, slice):
            pos = positive_index_checked(key, size, False)
            items = self._elements[:]
            items[pos] = value
        else:
            values = list(value) if isinstance(value, (list, tuple, Part)) else [value]
            r = self._slice_range(key)
            if r is None:
                raise RangeError("slice start {} too small for Part of length {}".format(key.start, size))
            start, stop = r
            if start >= size:
                self.insert(start, *values)
                return
            count = clip_count(start, stop, size)
            if count % 2 != len(values) % 2:
                raise StructuralError("can't replace {} elements with {}".format(count, len(values)))
            items = self._elements[:start] + values + self._elements[start+count:]
        self._elements = self._normalized(items, compact=False, compacter=False)

    def append(self, element):
        """Not supported, a single element can't be appended.

        Use :meth:`extend` with a content element and a Boundary instead.

        """
        raise UnsupportedOperationError("can't append a single element to a Part, use extend()")

    def pop(self, index=-1):
        """Not supported, use :meth:`take` instead."""
        raise UnsupportedOperationError("can't pop a single element from a Part, use take()")

    def remove(self, element):
        """Not supported, use :meth:`take` instead."""
        raise UnsupportedOperationError("can't remove a single element from a Part, use take()")

    def clear(self):
        """Remove all elements."""
        self._elements.clear()

    def merge_adjacent(self, start, stop=None, use_para_index=False):
        """Merge the content nodes from start upto stop into one Paragraph.

        The Boundaries between the merged content nodes become part of the new
        Paragraph, the Boundary after the last merged content node is kept.
        If ``use_para_index`` is True, start and stop count content nodes
        instead of elements.

        Returns the new Paragraph, or None if nothing was merged, which
        happens if start is odd or if there are less than two content nodes in
        the range.

        """
        size = len(self._elements)
        if use_para_index:
            count = size // 2
            start = positive_index(start, count)
            stop = count if stop is None else positive_index(stop, count)
            if start is None or stop is None:
                return None
            start, stop = start * 2, stop * 2 - 1
        else:
            start = positive_index(start, size)
            stop = size if stop is None else positive_index(stop, size)
            if start is None or stop is None:
                return None
        if start % 2:
            return None
        stop = min(stop, size)
        last = stop - 1 if stop % 2 else stop - 2
        if last - start < 2:
            return None
        first = self._elements[start]
        text = ''.join(n.join() for n in self._elements[start:last+1])
        para = Paragraph(text, None if first.is_part() else first.kind)
        self._elements[start:last+1] = [para]
        self._renormalize()
        logger.debug("merged elements %d-%d into %r", start, last, para)
        return self._elements[start]

    def merge_if(self, predicate):
        """Merge adjacent content nodes for which predicate returns True.

        The predicate is called with three arguments: a tuple (content,
        boundary, content), the Boundary before the first content (or None)
        and the Boundary after the second content (or None). Consecutive
        approved pairs are merged into one Paragraph.

        Returns True if anything was merged.

        """
        elements = self._elements
        runs = []
        for i in range(0, len(elements) - 2, 2):
            before = elements[i - 1] if i else None
            after = elements[i + 3] if i + 3 < len(elements) else None
            if predicate((elements[i], elements[i + 1], elements[i + 2]), before, after):
                if runs and runs[-1][1] == i:
                    runs[-1][1] = i + 2
                else:
                    runs.append([i, i + 2])
        for start, last in reversed(runs):
            self.merge_adjacent(start, last + 1)
        return bool(runs)

    def _emptify_last_boundaries(self):
        """Empty the trailing Boundaries (recursively) and return their text."""
        if not self._elements:
            return ""
        prev = self._elements[-2]
        text = prev._emptify_last_boundaries() if prev.is_part() else ""
        last = self._elements[-1]
        self._elements[-1] = Boundary("", last.kind)
        return text + last.text

    def squash_boundary_at(self, index):
        """Move the text of the trailing Boundaries of the Part before index
        into the Boundary at index.

        Returns the new Boundary, or None if the index is beyond the end.

        """
        pos = positive_index_checked(index, len(self._elements))
        if pos % 2 == 0:
            raise StructuralError("index {} is not at a Boundary".format(index))
        elif pos >= len(self._elements):
            return None
        prev = self._elements[pos - 1]
        if prev.is_part():
            text = prev._emptify_last_boundaries()
            if text:
                boundary = self._elements[pos]
                self._elements[pos] = Boundary(self._unicode(text + boundary.text), boundary.kind)
        return self._elements[pos]

    def squash_boundaries(self):
        """Call :meth:`squash_boundary_at` for all Boundaries and return self."""
        for i in range(1, len(self._elements), 2):
            self.squash_boundary_at(i)
        return self

    def map_paras(self, func, recursive=True):
        """Return a new Part with func applied to every Paragraph.

        If ``recursive`` is True, the function is applied to the Paragraphs of
        nested Parts, otherwise to the nested Parts themselves. The new Part is
        compacted according to the options.

        """
        items = []
        for i, n in enumerate(self._elements):
            if i % 2:
                items.append(n)
            elif recursive and n.is_part():
                items.append(n.map_paras(func, True))
            else:
                items.append(func(n))
        return type(self)(items, kind=self.kind, options=self.options)

    map_parts = map_paras

    def map_boundaries(self, func, recursive=True):
        """Return a new Part with func applied to every Boundary.

        If ``recursive`` is True, the Boundaries of nested Parts are mapped
        as well.

        """
        items = []
        for i, n in enumerate(self._elements):
            if i % 2:
                items.append(func(n))
            elif recursive and n.is_part():
                items.append(n.map_boundaries(func, True))
            else:
                items.append(n)
        return type(self)(items, kind=self.kind, options=self.options)

    def each_paras_with_index(self):
        """Yield (index, node) for every content node."""
        for i in range(0, len(self._elements), 2):
            yield i, self._elements[i]

    each_parts_with_index = each_paras_with_index

    def each_boundaries_with_index(self):
        """Yield (index, Boundary) for every Boundary."""
        for i in range(1, len(self._elements), 2):
            yield i, self._elements[i]

    def reparse(self, rule=None, start=0, stop=None):
        """Parse the text of the elements from start upto stop again, with
        the rule (default: :data:`~.rule.DEFAULT_RULE`), and replace them with
        the elements of the parsed Part, at the same level. Returns self.

        """
        r = self._slice_range(slice(start, stop))
        if r is None:
            raise RangeError("start {} too small for Part of length {}".format(start, len(self)))
        start, stop = r
        count = clip_count(start, stop, len(self._elements))
        if not count:
            return self
        self._check_range(start, count)
        text = ''.join(n.join() for n in self._elements[start:start+count])
        parsed = type(self).parse(text, rule, self.options)
        self[start:start+count] = parsed.to_list()
        return self

    ## comparison and copying

    def __eq__(self, other):
        if not isinstance(other, Part):
            return NotImplemented
        return self.paras == other.paras and self.boundaries == other.boundaries

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def body_equals(self, other):
        """Return True if all elements are equivalent, see :meth:`~.node.Node.equals`."""
        return len(self) == len(other) and all(a.equals(b) for a, b in zip(self, other))

    def __add__(self, other):
        if not isinstance(other, (Part, list, tuple)):
            return NotImplemented
        return type(self)(self.to_list() + list(other), kind=self.kind, options=self.options)

    def copy(self):
        """Return a shallow copy, that shares the nodes with this Part."""
        new = type(self).__new__(type(self))
        new.kind = self.kind
        new.options = self.options
        new._elements = list(self._elements)
        return new

    def deepcopy(self):
        """Return a copy with copies of all nodes."""
        new = self.copy()
        new._elements = [n.deepcopy() for n in self._elements]
        return new

