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
A Qt browser for a score hierarchy (needs PySide6).

:class:`HierarchyModel` lets a :class:`QTreeView` display any hierarchy via a
:class:`~scoretree.adapter.HierarchyAdapter`. :class:`ScoreBrowser` puts the
tree view and a read-only HTML pane side by side, and keeps the pane in sync
with the selection using a :class:`~scoretree.selection.SelectionCoordinator`.

"""

import logging
import sys

from PySide6.QtCore import QAbstractItemModel, QModelIndex, Qt
from PySide6.QtWidgets import (
    QAbstractItemView, QApplication, QMainWindow, QSplitter, QTextBrowser,
    QTreeView)

from . import dump
from .adapter import HierarchyAdapter
from .selection import SelectionCoordinator


logger = logging.getLogger(__name__)


#: Default window height in pixels
WINDOW_HEIGHT = 550

#: Default width in pixels for the left part (the tree)
LEFT_WIDTH = 300

#: Default width in pixels for the right part (the detail)
RIGHT_WIDTH = 340

#: Default window width in pixels
WINDOW_WIDTH = LEFT_WIDTH + RIGHT_WIDTH


class HierarchyModel(QAbstractItemModel):
    """A read-only, single column item model over a HierarchyAdapter.

    The root node is the only top level row. Children are asked from the
    adapter when the view expands a node; the parent of every node handed
    out is remembered, because the adapter can't tell it.

    """
    def __init__(self, adapter, label=None, parent=None):
        super().__init__(parent)
        self.adapter = adapter
        self._label = label or dump.label
        self._parents = {}

    def node(self, index):
        """Return the node at the index, or None for an invalid index."""
        if index.isValid():
            return index.internalPointer()

    def index(self, row, column, parent=QModelIndex()):
        if not self.hasIndex(row, column, parent):
            return QModelIndex()
        if not parent.isValid():
            return self.createIndex(row, column, self.adapter.root())
        node = parent.internalPointer()
        child = self.adapter.child_at(node, row)
        self._parents[id(child)] = node
        return self.createIndex(row, column, child)

    def parent(self, index=QModelIndex()):
        if not index.isValid():
            return QModelIndex()
        node = index.internalPointer()
        root = self.adapter.root()
        if node is root:
            return QModelIndex()
        parent = self._parents[id(node)]
        if parent is root:
            return self.createIndex(0, 0, parent)
        row = self.adapter.index_of(self._parents[id(parent)], parent)
        return self.createIndex(row, 0, parent)

    def rowCount(self, parent=QModelIndex()):
        if parent.column() > 0:
            return 0
        if not parent.isValid():
            return 1
        return self.adapter.child_count(parent.internalPointer())

    def columnCount(self, parent=QModelIndex()):
        return 1

    def hasChildren(self, parent=QModelIndex()):
        if not parent.isValid():
            return True
        return not self.adapter.is_leaf(parent.internalPointer())

    def data(self, index, role=Qt.DisplayRole):
        if index.isValid() and role == Qt.DisplayRole:
            return self._label(index.internalPointer())

    def setData(self, index, value, role=Qt.EditRole):
        if index.isValid():
            self.adapter.set_value(index.internalPointer(), value)
        return False

    def flags(self, index):
        if not index.isValid():
            return Qt.NoItemFlags
        return Qt.ItemIsEnabled | Qt.ItemIsSelectable

    def path(self, index):
        """Return the list of nodes from the root to the node at index."""
        path = []
        while index.isValid():
            path.append(index.internalPointer())
            index = self.parent(index)
        path.reverse()
        return path


class ScoreBrowser(QSplitter):
    """A tree view (left) and a detail pane (right) for a hierarchy.

    ``describe`` is called with the selected node and returns HTML for the
    detail pane, by default :func:`~scoretree.dump.html_dump`.

    """
    def __init__(self, adapter, describe=None, parent=None):
        super().__init__(Qt.Horizontal, parent)
        self.model = HierarchyModel(adapter, parent=self)

        self.tree = QTreeView()
        self.tree.setHeaderHidden(True)
        self.tree.setModel(self.model)
        self.tree.setSelectionMode(QAbstractItemView.SingleSelection)
        self.tree.expand(self.model.index(0, 0))

        self.detail = QTextBrowser()
        self.detail.setReadOnly(True)

        self.coordinator = SelectionCoordinator(describe or dump.html_dump, self.detail.setHtml)
        self.tree.selectionModel().selectionChanged.connect(self.slot_selection_changed)

        self.addWidget(self.tree)
        self.addWidget(self.detail)
        self.setChildrenCollapsible(False)
        self.setOpaqueResize(True)
        self.setSizes([LEFT_WIDTH, RIGHT_WIDTH])

    def slot_selection_changed(self, selected, deselected):
        """Called when the tree selection changes; updates the detail pane."""
        indexes = selected.indexes()
        path = self.model.path(indexes[0]) if indexes else []
        self.coordinator.on_selection_changed(path)


def make_frame(name, score, describe=None):
    """Create and show a window browsing the score; returns the window.

    A QApplication must exist.

    """
    window = QMainWindow()
    window.setWindowTitle("Tree of {}".format(name or "score"))
    adapter = HierarchyAdapter(score, parent=lambda node: node.parent)
    window.setCentralWidget(ScoreBrowser(adapter, describe))
    w, h = WINDOW_WIDTH + 10, WINDOW_HEIGHT + 10
    window.resize(w, h)
    screen = window.screen().availableGeometry()
    window.move(screen.width() // 3 - w // 2, screen.height() // 2 - h // 2)
    window.show()
    return window


def run(name, score, describe=None):
    """Show the score browser and run the Qt event loop; returns the exit code."""
    app = QApplication.instance() or QApplication(sys.argv)
    window = make_frame(name, score, describe)
    logger.debug("showing %r", window.windowTitle())
    return app.exec()
