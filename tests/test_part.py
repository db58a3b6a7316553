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
Test the Part container.
"""

import copy
import re

import pytest

### find textparts
import sys
sys.path.insert(0, '.')

import textparts
from textparts.config import Options
from textparts.exceptions import (
    NodeTypeError, RangeError, StructuralError, UnsupportedOperationError)
from textparts.text import Paragraph, Boundary
from textparts.part import Part


TEXT = "a\n\nb\n\nc\n\nd\n\ne\n\n"


def check_construct():
    """Test creating and normalizing Parts."""
    # scenario A
    pt = Part(["a", "\n\n\n", "b", "\n\n\n", "c", "\n\n"])
    assert len(pt) == 6
    assert pt.paras == ["a", "b", "c"]
    assert pt.parts == ["a", "b", "c"]
    assert pt.boundaries == ["\n\n\n", "\n\n\n", "\n\n"]
    assert all(isinstance(n, Paragraph) for n in pt.paras)
    assert all(isinstance(n, Boundary) for n in pt.boundaries)

    # scenario B
    pt = Part(["a", "\n\n\n", "b", "\n\n\n", "c"])
    assert len(pt) == 6
    assert pt[5] == "" and isinstance(pt[5], Boundary)

    assert len(Part()) == 0
    assert Part().join() == ""
    assert Part() and Part().is_empty()
    assert Part(["a", "b"], ["\n"]).to_list() == ["a", "\n", "b", ""]
    assert Part(["a", None, "b", "\n"]).to_list() == ["a", "", "b", "\n"]
    assert Part(["a", "b"], ["\n", "\n"]) == Part(["a", "\n", "b", "\n"])

    # compacting
    assert len(Part(["", "", "a", "\n"])) == 2
    assert len(Part(["", "", "a", "\n"], compacter=False)) == 4
    assert len(Part([None, None, "a", "\n"], compacter=False)) == 2
    assert len(Part([None, None, "a", "\n"], compact=False, compacter=False)) == 4
    assert Part(["", "", "a"]).to_list() == ["a", ""]
    assert len(Part(["", "", "a", "\n"], options=Options(compacter=False))) == 4

    # nested lists become Parts
    pt = Part([["a", "\n"], "", "b"])
    assert pt[0].is_part() and isinstance(pt[0], Part)
    assert pt.join() == "a\nb"

    # wrong types
    with pytest.raises(NodeTypeError):
        Part([Boundary("x"), "y"])
    with pytest.raises(NodeTypeError):
        Part(["a", Paragraph("b")])
    with pytest.raises(NodeTypeError):
        Part(["a", ["x", ""]])
    with pytest.raises(NodeTypeError):
        Part([1, ""])
    with pytest.raises(StructuralError):
        Part(["a", Part()])
    with pytest.raises(TypeError):
        Part("abc")
    with pytest.raises(TypeError):
        Part(1)

    # existing nodes are used if their text is normalized
    p = Paragraph("x", "title")
    assert Part([p, ""])[0] is p
    q = Paragraph("e\u0301", "k")
    pt = Part([q, ""])
    assert pt[0] is not q
    assert pt[0] == "\u00e9" and pt[0].kind == "k"
    assert Part(["e\u0301", ""], options=Options(unicode_form=None))[0] == "e\u0301"
    assert Part(["x", ""], kind="section").kind == "section"


def check_parse():
    """Test parsing and the round trip."""
    # scenario D, before merging
    pt = Part.parse(TEXT)
    assert len(pt) == 10
    assert pt.paras == ["a", "b", "c", "d", "e"]

    for text in ("", "a", "\n", "\n\n", "a\n\n", "\n\na\nb\n \n\nc", "a\r\n\r\nb\r\n",
                 "  first\n\n\n\tsecond  \n\n\n\n"):
        assert textparts.parse(text).join() == text
        assert str(textparts.parse(text)) == text
        assert len(textparts.parse(text)) % 2 == 0
    assert textparts.parse("").is_empty()

    pt = Part.parse("a, b,c", re.compile(r",\s*"))
    assert pt.to_list() == ["a", ", ", "b", ",", "c", ""]
    pt = Part.parse("a b", lambda text: text.split(" "))
    assert pt.to_list() == ["a", "b"]
    assert Part.parse("x", kind="doc").kind == "doc"

    pt = Part.parse("a b\n\nc d\n\n")
    assert pt.reparse(re.compile(" "), 0, 2) is pt
    assert pt.join() == "a b\n\nc d\n\n"
    assert pt.paras == ["a", "b\n\n", "c d"]
    # the parsed elements are spliced in, not nested
    assert len(pt) == 6
    assert not any(n.is_part() for n in pt)
    with pytest.raises(StructuralError):
        pt.reparse(None, 1, 3)


def check_read():
    """Test reading elements and ranges."""
    pt = Part(["a", "\n\n", "b", "\n\n", "c", "\n\n"])
    assert pt[0] == "a"
    assert pt[-1] == "\n\n"
    assert pt[6] is None
    assert pt[-7] is None

    assert pt[2:4] == Part(["b", "\n\n"])
    assert isinstance(pt[2:4], Part)
    assert len(pt[2:]) == 4
    assert pt[:] == pt
    assert pt[:] is not pt
    assert pt[0:99] == pt
    assert pt[-4:].to_list() == ["b", "\n\n", "c", "\n\n"]
    assert pt[6:].is_empty()
    assert pt[98:99].is_empty()
    assert pt[3:3].is_empty()
    assert pt[-8:] is None
    with pytest.raises(StructuralError):
        pt[1:3]
    with pytest.raises(StructuralError):
        pt[0:3]
    with pytest.raises(ValueError):
        pt[::2]

    assert list(pt) == ["a", "\n\n", "b", "\n\n", "c", "\n\n"]
    assert list(reversed(pt))[0] is pt[5]
    assert "b" in pt and "x" not in pt
    assert pt.to_list() is not pt.children()
    assert str(pt) == pt.join() == "a\n\nb\n\nc\n\n"

    assert pt.index_para(0)
    assert not pt.index_para(1)
    assert not pt.index_para(-1)
    assert pt.index_para(-2)
    with pytest.raises(RangeError):
        pt.index_para(-7)

    pt = Part(["", "\n", "a", ""])
    assert pt.first_significant_index() == 1
    assert pt.last_significant_index() == 2
    assert pt.first_significant_element() is pt[1]
    assert pt.last_significant_element() is pt[2]
    pt = Part(["", "", "", ""], compacter=False)
    assert pt.first_significant_index() == 3
    assert pt.last_significant_index() == 0
    assert Part().first_significant_index() is None
    assert Part().last_significant_index() is None
    assert Part().first_significant_element() is None

    pt = Part([["a", "\n"], "\n\n", "b", ""])
    assert pt.boundary_extended_at(1) == [Boundary("\n"), Boundary("\n\n")]
    assert pt.boundary_extended_at(-1) == [Boundary("")]
    assert pt.boundary_extended_at(5) is None
    with pytest.raises(StructuralError):
        pt.boundary_extended_at(0)


def check_insert():
    """Test inserting elements."""
    pt = Part(["a", "\n\n", "b", "\n\n"])
    assert pt.insert(2, "x", "\n") is pt
    assert pt.to_list() == ["a", "\n\n", "x", "\n", "b", "\n\n"]
    pt.insert(1, "\n", "y")
    assert pt.to_list() == ["a", "\n", "y", "\n\n", "x", "\n", "b", "\n\n"]
    assert isinstance(pt[1], Boundary) and isinstance(pt[2], Paragraph)
    pt.insert(-2, "z", "")
    assert pt[6] == "z" and pt[8] == "b"
    assert pt.join() == "a\ny\n\nx\nz" + "b\n\n"

    # scenario E
    pt = Part(["a", "\n\n", "b", "\n\n"])
    with pytest.raises(StructuralError):
        pt.insert(2, "x")
    with pytest.raises(StructuralError):
        pt.insert(4, "x")
    assert len(pt) == 4
    pt.insert(6, "x")
    assert pt.to_list() == ["a", "\n\n", "b", "\n\n", "", "", "x", ""]
    pt.insert(9, "y", "\n")
    assert pt.to_list()[8:] == ["", "y", "\n", ""]
    assert len(pt) % 2 == 0

    pt = Part(["a", "\n\n", "b", "\n\n"])
    with pytest.raises(RangeError):
        pt.insert(-9, "x", "y")
    with pytest.raises(NodeTypeError):
        pt.insert(2, Boundary("x"), "y")
    with pytest.raises(NodeTypeError):
        pt.insert(1, Paragraph("x"), "y")
    with pytest.raises(NodeTypeError):
        pt.insert(2, "x", ["y"])
    assert pt.to_list() == ["a", "\n\n", "b", "\n\n"]
    pt.insert(4, ["c", ""], "")
    assert pt[4].is_part()

    pt = Part(["a", "\n"])
    assert pt.extend(["b", ""]) is pt
    assert pt.to_list() == ["a", "\n", "b", ""]
    with pytest.raises(StructuralError):
        pt.extend(["c"])
    # inserting does not compact
    pt.insert(4, "", "")
    assert len(pt) == 6

    with pytest.raises(UnsupportedOperationError):
        pt.append("c")
    with pytest.raises(AttributeError):
        pt.append("c")
    with pytest.raises(UnsupportedOperationError):
        pt.pop()
    with pytest.raises(UnsupportedOperationError):
        pt.remove("a")
    with pytest.raises(UnsupportedOperationError):
        del pt[0]
    assert len(pt) == 6
    pt.clear()
    assert pt.is_empty()


def check_delete():
    """Test taking and deleting ranges."""
    pt = Part(["a", "1", "b", "2", "c", "3"])
    taken = pt.take(2, 4)
    assert taken == Part(["b", "2"])
    assert pt == Part(["a", "1", "c", "3"])
    with pytest.raises(StructuralError):
        pt.take(1, 3)
    with pytest.raises(StructuralError):
        pt.take(0, 1)
    with pytest.raises(StructuralError):
        pt.take(-1)
    assert len(pt) == 4
    assert pt.take(10) is None
    assert pt.take(-9) is None
    assert pt.take(0, 0).is_empty()
    assert pt.take(-2).to_list() == ["c", "3"]
    assert pt.take(0, 99).to_list() == ["a", "1"]
    assert pt.is_empty()

    pt = Part(["a", "1", "b", "2", "c", "3"])
    del pt[0:2]
    assert pt.to_list() == ["b", "2", "c", "3"]
    del pt[-2:]
    assert pt.to_list() == ["b", "2"]
    with pytest.raises(StructuralError):
        del pt[0:1]
    with pytest.raises(ValueError):
        del pt[::2]
    del pt[:]
    assert pt.is_empty()


def check_setitem():
    """Test replacing elements and ranges."""
    pt = Part(["a", "1", "b", "2"])
    pt[0] = "x"
    assert isinstance(pt[0], Paragraph) and pt[0] == "x"
    pt[1] = "y"
    assert isinstance(pt[1], Boundary) and pt[1] == "y"
    pt[-2] = ["n", "\n"]
    assert pt[2].is_part()
    with pytest.raises(NodeTypeError):
        pt[1] = Paragraph("z")
    with pytest.raises(NodeTypeError):
        pt[0] = Boundary("z")
    with pytest.raises(RangeError):
        pt[4] = "x"
    with pytest.raises(RangeError):
        pt[-5] = "x"
    assert pt.join() == "xyn\n2"

    pt = Part(["a", "1", "b", "2"])
    pt[0:2] = ["p", "q"]
    assert pt.to_list() == ["p", "q", "b", "2"]
    with pytest.raises(StructuralError):
        pt[0:2] = ["p"]
    pt[1:2] = "r"
    assert pt.to_list() == ["p", "r", "b", "2"]
    pt[1:1] = ["s", "t"]
    assert pt.to_list() == ["p", "s", "t", "r", "b", "2"]
    pt[2:4] = []
    assert pt.to_list() == ["p", "s", "b", "2"]
    pt[6:] = ["u", ""]
    assert pt.to_list() == ["p", "s", "b", "2", "", "", "u", ""]
    with pytest.raises(RangeError):
        pt[-99:] = []
    with pytest.raises(NodeTypeError):
        pt[0:2] = ["x", Paragraph("y")]
    assert len(pt) == 8


def check_merge():
    """Test merging content nodes."""
    # scenario D
    for args, kwargs in (((2, 5), {}), ((2, 6), {}), ((2, -4), {}), ((1, 3), {'use_para_index': True})):
        pt = Part.parse(TEXT)
        merged = pt.merge_adjacent(*args, **kwargs)
        assert merged == "b\n\nc"
        assert isinstance(merged, Paragraph)
        assert pt[2] is merged
        assert len(pt) == 8
        assert pt[2:4].join() == "b\n\nc\n\n"
        assert pt.join() == TEXT

    pt = Part.parse(TEXT)
    assert pt.merge_adjacent(8, 13) is None
    assert pt.merge_adjacent(1, 5) is None
    assert pt.merge_adjacent(2, 3) is None
    assert pt.merge_adjacent(-99, 5) is None
    assert len(pt) == 10
    assert pt.merge_adjacent(0) == "a\n\nb\n\nc\n\nd\n\ne"
    assert pt.to_list() == ["a\n\nb\n\nc\n\nd\n\ne", "\n\n"]

    # merging a nested Part
    pt = Part([["a", " ", "b", ""], "\n", "c", ""])
    assert pt.merge_adjacent(0) == "a b\nc"
    assert pt.to_list() == ["a b\nc", ""]

    pt = Part.parse(TEXT)
    assert pt.merge_if(lambda pair, before, after: pair[0] in ("a", "d"))
    assert pt.to_list() == ["a\n\nb", "\n\n", "c", "\n\n", "d\n\ne", "\n\n"]

    pt = Part.parse(TEXT)
    calls = []
    def predicate(pair, before, after):
        calls.append((pair, before, after))
        return pair[2] != "e"
    assert pt.merge_if(predicate)
    assert pt.to_list() == ["a\n\nb\n\nc\n\nd", "\n\n", "e", "\n\n"]
    assert len(calls) == 4
    assert calls[0][1] is None
    assert calls[0][0] == ("a", "\n\n", "b")
    assert calls[1][1] == "\n\n"
    assert calls[3][2] == "\n\n"
    assert pt.join() == TEXT

    pt = Part.parse(TEXT)
    assert not pt.merge_if(lambda *args: False)
    assert len(pt) == 10
    assert not Part().merge_if(lambda *args: True)


def check_squash():
    """Test moving trailing Boundaries of nested Parts."""
    pt = Part([["a", "\n"], "\n\n", "b", ""])
    assert pt.squash_boundary_at(1) == "\n\n\n"
    assert pt[0][1] == ""
    assert pt.join() == "a\n\n\nb"
    with pytest.raises(StructuralError):
        pt.squash_boundary_at(0)
    assert pt.squash_boundary_at(7) is None

    pt = Part([[["a", "\n"], " "], "\n", "b", ""])
    assert pt.squash_boundaries() is pt
    assert pt[1] == "\n \n"
    assert pt[0][1] == "" and pt[0][0][1] == ""
    assert pt.join() == "a\n \nb"


def check_map():
    """Test mapping and iterating with indices."""
    pt = Part(["a", "\n", ["b", " ", "c", ""], "\n"])
    m = pt.map_paras(lambda p: p.text.upper())
    assert isinstance(m, Part)
    assert m.join() == "A\nB C\n"
    assert pt.join() == "a\nb c\n"
    m = pt.map_paras(lambda n: n.join().upper(), recursive=False)
    assert m.to_list() == ["A", "\n", "B C", "\n"]
    m = pt.map_boundaries(lambda b: b.text.replace("\n", "\r\n"))
    assert m.join() == "a\r\nb c\r\n"
    m = pt.map_boundaries(lambda b: "-", recursive=False)
    assert m.join() == "a-b c-"

    assert list(pt.each_paras_with_index()) == [(0, "a"), (2, pt[2])]
    assert list(pt.each_boundaries_with_index()) == [(1, "\n"), (3, "\n")]


def check_equality_copy():
    """Test comparing, copying and adding Parts."""
    assert Part(["a", "b"]) == Part(["a", "b"])
    assert Part(["a", "b"]) != Part(["a", "c"])
    assert Part(["a", "b"]) != ["a", "b"]
    assert not Part(["a", "b"]) == ("a", "b")
    assert Part([["a", ""], "b"]) != Part(["a", "b"])
    with pytest.raises(TypeError):
        hash(Part())

    pt = Part(["a", "\n"])
    c = pt.copy()
    assert c is not pt and c == pt
    assert c[0] is pt[0]
    pt[0].append_text("x")
    assert c[0] == "ax"
    c.insert(2, "b", "")
    assert len(pt) == 2
    assert copy.copy(pt)[0] is pt[0]

    d = pt.deepcopy()
    assert d == pt and d[0] is not pt[0]
    pt[0].append_text("y")
    assert d != pt
    assert copy.deepcopy(pt)[0] is not pt[0]

    pt = Part([["a", "\n"], ""], kind="doc")
    c = pt.copy()
    assert c[0] is pt[0] and c.kind == "doc"
    d = copy.deepcopy(pt)
    assert d[0] is not pt[0] and d[0][0] is not pt[0][0]
    assert d.equals(pt)

    pt = Part(["a", "\n", "b", "\n"])
    assert pt + ["d"] == Part(["a", "\n", "b", "\n", "d", ""])
    assert pt + Part(["c", ""]) == Part(["a", "\n", "b", "\n", "c", ""])
    assert len(pt) == 4
    with pytest.raises(TypeError):
        pt + "s"


def check_normalize():
    """Test normalization."""
    pt = Part(["", "", "a", "\n"], compacter=False)
    assert len(pt) == 4
    n = pt.normalize()
    assert len(n) == 2 and len(pt) == 4
    assert n.normalize() == n
    assert n.normalize().to_list() == n.to_list()
    assert pt.normalize(compacter=False) == pt
    assert pt.normalize_inplace() is pt
    assert len(pt) == 2

    # nested Parts are copied and compacted, the original stays the same
    inner = Part(["", "", "a", ""], compacter=False)
    pt = Part([inner, "x"], compacter=False)
    n = pt.normalize()
    assert n[0] is not pt[0]
    assert n[0].to_list() == ["a", ""]
    assert len(pt[0]) == 4
    n[0].insert(0, "z", "")
    assert pt[0].to_list() == ["", "", "a", ""]
    assert n.join() == "za" + "x"
    assert pt.normalize(recursive=False)[0] is inner
    assert len(inner) == 4
    pt.normalize_inplace()
    assert pt[0] is not inner and len(pt[0]) == 2

    opts = Options(unicode_form=None)
    assert textparts.parse("e\u0301\n\nx", options=opts).join() == "e\u0301\n\nx"
    assert textparts.parse("e\u0301\n\nx").join() == "\u00e9\n\nx"
    assert textparts.parse("a\n\nb", options=opts).options is opts


def test_main():
    """Main test function."""
    check_construct()
    check_parse()
    check_read()
    check_insert()
    check_delete()
    check_setitem()
    check_merge()
    check_squash()
    check_map()
    check_equality_copy()
    check_normalize()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
