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
Keeps a detail view in sync with the selection in a tree view.

A tree view emits the path (from the root to the selected node) each time
the selection changes. The :class:`SelectionCoordinator` is the subscriber:
it describes the last node in the path and publishes the text to the detail
view::

    >>> from scoretree import read, browse
    >>> selection, pane = browse(read.score("{ c'4 d' }"))
    >>> selection.select_trail([0, 0, 0, 0])
    >>> pane.text.splitlines()[0]
    '<h3>Chord</h3>'

:class:`TreeSelection` is a tree view without a screen, keeping a single
selection; the Qt browser in :mod:`scoretree.qt` uses the coordinator the same
way.

"""

import logging

from .adapter import NOT_FOUND, ProtocolViolation


logger = logging.getLogger(__name__)


class SelectionCoordinator:
    """Publishes ``describe(node)`` for the selected node.

    ``describe`` is called with a node and returns text (which may contain
    markup); ``publish`` is called with that text and should replace whatever
    the detail view showed before.

    """
    def __init__(self, describe, publish):
        self._describe = describe
        self._publish = publish

    def on_selection_changed(self, path):
        """Called by the tree view with the path to the newly selected node.

        An empty path (the selection was cleared) leaves the detail view
        unchanged. Exceptions raised by ``describe`` propagate, and then
        nothing is published.

        """
        if not path:
            return
        node = path[-1]
        text = self._describe(node)
        logger.debug("publishing description of %r (%d characters)", node, len(text))
        self._publish(text)


class DetailPane:
    """A detail view without a screen: keeps the last published text."""
    def __init__(self):
        self.text = ''

    def set_text(self, text):
        """Replace the text."""
        self.text = text


class TreeSelection:
    """The single selection of a tree view over a :class:`~.adapter.HierarchyAdapter`.

    One subscriber (a callable, see :meth:`subscribe`) is called with the
    new path (a tuple) each time the selection is set or cleared.

    """
    def __init__(self, adapter):
        self.adapter = adapter
        self._path = ()
        self._subscriber = None

    @property
    def path(self):
        """The nodes from the root to the selected node; empty if nothing is selected."""
        return self._path

    @property
    def node(self):
        """The selected node, or None."""
        return self._path[-1] if self._path else None

    def subscribe(self, callback):
        """Set the subscriber, replacing the previous one. None unsubscribes."""
        self._subscriber = callback

    def select(self, path):
        """Select the last node of path.

        The path must start at the root of the adapter and each next node must
        be a child of the previous one; otherwise :class:`ProtocolViolation`
        is raised and the selection is not changed.

        """
        path = tuple(path)
        if not path:
            raise ProtocolViolation("can't select an empty path, use clear()")
        if path[0] is not self.adapter.root():
            raise ProtocolViolation("path does not start at the root")
        for parent, child in zip(path, path[1:]):
            if self.adapter.index_of(parent, child) == NOT_FOUND:
                raise ProtocolViolation("{!r} is not a child of {!r}".format(child, parent))
        self._set(path)

    def select_trail(self, trail):
        """Select the node reached by following the child indices from the root."""
        node = self.adapter.root()
        path = [node]
        for index in trail:
            node = self.adapter.child_at(node, index)
            path.append(node)
        self._set(tuple(path))

    def select_node(self, node):
        """Select the node; the adapter must know how to find its parents."""
        self._set(tuple(self.adapter.path_to(node)))

    def clear(self):
        """Clear the selection."""
        self._set(())

    def _set(self, path):
        self._path = path
        if self._subscriber:
            self._subscriber(path)
