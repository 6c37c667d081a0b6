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
The scoretree module.

Browse an in-memory score hierarchy as an expandable tree, and show the
details of the selected node in a side panel.

The two central pieces are the :class:`~.adapter.HierarchyAdapter`, which
exposes any existing hierarchy through a small, read-only tree navigation
contract, and the :class:`~.selection.SelectionCoordinator`, which turns
selection changes into fresh detail text.

"""

from .pkginfo import version, version_string
from .adapter import HierarchyAdapter, NOT_FOUND, OutOfRange, ProtocolViolation
from .selection import DetailPane, SelectionCoordinator, TreeSelection


__all__ = (
    'HierarchyAdapter', 'NOT_FOUND', 'OutOfRange', 'ProtocolViolation',
    'DetailPane', 'SelectionCoordinator', 'TreeSelection',
    'browse', 'load', 'version', 'version_string',
)


def load(filename, encoding=None):
    """Convenience function to read a LilyPond file and return a
    :class:`~.score.Score`.

    Raises :class:`OSError` if the file can't be read.

    """
    from . import read
    return read.load(filename, encoding)


def browse(score, describe=None):
    """Return a (:class:`TreeSelection`, :class:`DetailPane`) tuple for a
    headless browsing session over the score.

    The selection is wired to the pane through a :class:`SelectionCoordinator`
    using ``describe`` (by default :func:`~.dump.html_dump`).

    """
    from . import dump
    adapter = HierarchyAdapter(score, parent=lambda node: node.parent)
    pane = DetailPane()
    coordinator = SelectionCoordinator(describe or dump.html_dump, pane.set_text)
    selection = TreeSelection(adapter)
    selection.subscribe(coordinator.on_selection_changed)
    return selection, pane
