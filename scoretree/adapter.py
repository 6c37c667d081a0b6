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
A read-only adapter that exposes any existing hierarchy to a tree view.

The hierarchy does not need to know anything about trees. The adapter only
needs the root object and a way to get the children of a node. By default
the node itself is used as the sequence of its children, which is the case
for :class:`~scoretree.node.Node`::

    >>> from scoretree.node import Node
    >>> from scoretree.adapter import HierarchyAdapter
    >>> x, y = Node(), Node()
    >>> a = HierarchyAdapter(Node(x, y))
    >>> a.child_count(a.root())
    2
    >>> a.index_of(a.root(), y)
    1

Other hierarchies can be browsed by giving a ``children`` function, e.g.
``HierarchyAdapter(root, children=lambda n: n.children)``.

If a ``parent`` function is also given, the adapter checks that the nodes it
is asked about really belong to the hierarchy, raising
:class:`ProtocolViolation` if not.

"""


#: Returned by :meth:`HierarchyAdapter.index_of` if the child is not found.
NOT_FOUND = -1


class ProtocolViolation(Exception):
    """Raised when a tree view asks about a node that is not in the hierarchy."""


class OutOfRange(ProtocolViolation, IndexError):
    """Raised when a child index is outside ``range(child_count(node))``."""


def _own_children(node):
    return node


class HierarchyAdapter:
    """Adapts a hierarchy rooted at ``root`` for a tree view.

    ``children`` is a function returning the ordered, indexable sequence of
    child nodes of a node; by default the node itself. ``parent`` is an
    optional function returning the parent of a node (or None for the root).

    All queries are free of side effects; the hierarchy is never modified.

    """
    def __init__(self, root, children=None, parent=None):
        self._root = root
        self._children = children or _own_children
        self._parent = parent
        self._listeners = {}

    def root(self):
        """Return the root node."""
        return self._root

    def child_count(self, node):
        """Return the number of children of the node."""
        return len(self._children_of(node))

    def child_at(self, node, index):
        """Return the child of the node at index.

        Raises :class:`OutOfRange` if the index is not in
        ``range(child_count(node))``; negative indices are not allowed.

        """
        children = self._children_of(node)
        if not 0 <= index < len(children):
            raise OutOfRange("child index {} out of range(0, {}) for {!r}".format(
                index, len(children), node))
        return children[index]

    def index_of(self, node, child):
        """Return the index of child in the children of node, or
        :data:`NOT_FOUND` if it is not a child.

        Children are compared by identity.

        """
        for index, n in enumerate(self._children_of(node)):
            if n is child:
                return index
        return NOT_FOUND

    def is_leaf(self, node):
        """Return True if the node has no children."""
        return self.child_count(node) == 0

    def path_to(self, node):
        """Return the list of nodes from the root down to and including node.

        Needs the ``parent`` function; raises :class:`ProtocolViolation` if it
        was not given or when the node is not in the hierarchy.

        """
        if self._parent is None:
            raise ProtocolViolation("can't find a path without a parent function")
        path = []
        n = node
        while n is not None:
            path.append(n)
            if n is self._root:
                path.reverse()
                return path
            n = self._parent(n)
        raise ProtocolViolation("node not in hierarchy: {!r}".format(node))

    def node_at(self, trail):
        """Return the node reached by following the list of child indices
        from the root.

        An empty trail returns the root. Raises :class:`OutOfRange` on an
        invalid index.

        """
        node = self._root
        for index in trail:
            node = self.child_at(node, index)
        return node

    ## listeners, never notified because the hierarchy is never changed via the adapter
    def add_listener(self, listener):
        """Register a listener; a listener already present is ignored."""
        if listener is not None:
            self._listeners.setdefault(id(listener), listener)

    def remove_listener(self, listener):
        """Unregister a listener; unknown listeners are ignored."""
        self._listeners.pop(id(listener), None)

    def listeners(self):
        """Return a list of the registered listeners."""
        return list(self._listeners.values())

    def set_value(self, node, new_value):
        """Does nothing; the hierarchy is not edited through the tree view."""

    def _children_of(self, node):
        """Return the children sequence of node, checking it belongs to us."""
        if self._parent is not None and node is not self._root:
            self.path_to(node)
        return self._children(node)
