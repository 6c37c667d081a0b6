# -*- coding: utf-8 -*-
#
# This file is part of `scoretree`, a browser for in-memory score hierarchies
#
# Copyright © 2026 by the scoretree developers
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
Test the HierarchyAdapter.
"""

import pytest

### find scoretree
import sys
sys.path.insert(0, '.')

from scoretree.adapter import HierarchyAdapter, NOT_FOUND, OutOfRange, ProtocolViolation
from scoretree.node import Node
from scoretree.score import Score, Part, Staff, Measure, Chord, Note, Rest, Clef


def make_score():
    return Score(
        Part(
            Staff(
                Measure(Clef('treble'), Chord(Note('c'), Note('e')), Rest()),
                Measure(Chord(Note('g')), number=2),
            ),
            Staff(
                Measure(Rest()),
                number=2,
            ),
        ),
        name="test",
    )


class Item:
    """A hierarchy that knows nothing about Node."""
    def __init__(self, name, *children):
        self.name = name
        self.children = list(children)


def all_nodes(adapter):
    nodes = [adapter.root()]
    for node in nodes:
        nodes.extend(adapter.child_at(node, i) for i in range(adapter.child_count(node)))
    return nodes


def structure(node):
    return [structure(n) for n in node]


def test_main():
    x, y = Node(), Node()
    root = Node(x, y)
    a = HierarchyAdapter(root)
    assert a.root() is root
    assert a.child_count(root) == 2
    assert a.child_at(root, 0) is x
    assert a.child_at(root, 1) is y
    with pytest.raises(OutOfRange):
        a.child_at(root, 2)
    with pytest.raises(IndexError):
        a.child_at(root, -1)
    assert a.is_leaf(x)
    assert not a.is_leaf(root)


def test_round_trip():
    s = make_score()
    a = HierarchyAdapter(s)
    for p in all_nodes(a):
        for i in range(a.child_count(p)):
            assert a.index_of(p, a.child_at(p, i)) == i


def test_leaf_consistency():
    a = HierarchyAdapter(make_score())
    for n in all_nodes(a):
        assert a.is_leaf(n) == (a.child_count(n) == 0)


def test_root_stability():
    s = make_score()
    a = HierarchyAdapter(s)
    assert a.root() is a.root() is s


def test_not_found():
    s = make_score()
    a = HierarchyAdapter(s)
    stranger = Node()
    for p in all_nodes(a):
        assert a.index_of(p, stranger) == NOT_FOUND
        assert a.index_of(p, p) == NOT_FOUND
    # a grandchild is not a child
    assert a.index_of(s, s[0][0]) == NOT_FOUND


def test_no_mutation():
    s = make_score()
    before = structure(s)
    a = HierarchyAdapter(s, parent=lambda node: node.parent)
    for n in all_nodes(a):
        a.is_leaf(n)
        a.index_of(n, s)
        a.set_value(n, "new value")
    assert structure(s) == before
    assert s.name == "test"


def test_other_hierarchy():
    b1 = Item("B1")
    b = Item("B", b1)
    root = Item("root", Item("A"), b)
    a = HierarchyAdapter(root, children=lambda item: item.children)
    assert a.child_count(root) == 2
    assert a.child_at(a.child_at(root, 1), 0) is b1
    assert a.index_of(b, b1) == 0
    assert a.index_of(root, b1) == NOT_FOUND
    assert a.is_leaf(b1)
    assert [n.name for n in all_nodes(a)] == ["root", "A", "B", "B1"]


def test_foreign_nodes():
    s = make_score()
    a = HierarchyAdapter(s, parent=lambda node: node.parent)
    foreign = Measure(Rest())
    with pytest.raises(ProtocolViolation):
        a.child_count(foreign)
    with pytest.raises(ProtocolViolation):
        a.child_at(foreign, 0)
    with pytest.raises(ProtocolViolation):
        a.index_of(foreign, foreign[0])
    with pytest.raises(ProtocolViolation):
        a.path_to(foreign[0])
    # a foreign child is just not found
    assert a.index_of(s, foreign) == NOT_FOUND
    # without a parent function nothing is checked
    assert HierarchyAdapter(s).child_count(foreign) == 1
    with pytest.raises(ProtocolViolation):
        HierarchyAdapter(s).path_to(s[0])


def test_path_and_trail():
    s = make_score()
    a = HierarchyAdapter(s, parent=lambda node: node.parent)
    chord = s[0][0][1][0]
    assert a.path_to(chord) == [s, s[0], s[0][0], s[0][0][1], chord]
    assert a.path_to(s) == [s]
    assert a.node_at([0, 0, 1, 0]) is chord
    assert a.node_at([]) is s
    with pytest.raises(OutOfRange):
        a.node_at([0, 5])


def test_listeners():
    a = HierarchyAdapter(Node())
    listener = object()
    a.add_listener(listener)
    a.add_listener(listener)
    assert a.listeners() == [listener]
    a.add_listener(None)
    a.add_listener([])      # unhashable listeners are fine too
    assert len(a.listeners()) == 2
    a.remove_listener(listener)
    a.remove_listener(listener)
    a.remove_listener(object())
    a.remove_listener(None)
    assert len(a.listeners()) == 1


def test_set_value():
    s = make_score()
    a = HierarchyAdapter(s)
    assert a.set_value(s[0], "other") is None
    assert a.set_value(Node(), None) is None
    assert s[0].name is None



if __name__ == "__main__" and 'test_main' in globals():
    test_main()

