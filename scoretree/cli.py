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
Command line interface: browse the score in a LilyPond file.

Without options, a window is opened (this needs PySide6). With ``--dump``
the score tree is printed, and ``--select`` prints the description of the
node at a trail of child indices, e.g. ``--select 0.0.2`` for the third
measure of the first staff.

"""

import argparse
import logging
import sys

from . import dump, read, version_string
from .adapter import HierarchyAdapter, ProtocolViolation
from .node import DUMP_STYLES, DUMP_STYLE_DEFAULT
from .selection import DetailPane, SelectionCoordinator, TreeSelection


logger = logging.getLogger(__name__)


def parse_trail(text):
    """Parse a dotted trail like ``'0.1.2'`` into a list of integers.

    An empty string is the root. Raises ValueError for invalid text.

    """
    if not text:
        return []
    return [int(part) for part in text.split('.')]


def build_parser():
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="scoretree",
        description="Browse the score hierarchy of a LilyPond file.",
    )
    parser.add_argument("filename", help="LilyPond file to read")
    parser.add_argument("--dump", action="store_true",
        help="print the score tree instead of opening a window")
    parser.add_argument("--style", choices=sorted(DUMP_STYLES), default=DUMP_STYLE_DEFAULT,
        help="tree style for --dump (default: %(default)s)")
    parser.add_argument("--select", metavar="TRAIL",
        help="print the description of the node at the dotted child indices, e.g. 0.0.1")
    parser.add_argument("--text", action="store_true",
        help="describe as plain text instead of HTML")
    parser.add_argument("-v", "--verbose", action="store_true", help="show debug logging")
    parser.add_argument("--version", action="version", version="%(prog)s " + version_string)
    return parser


def select(score, trail, describe):
    """Return the description of the node at trail, via a TreeSelection."""
    adapter = HierarchyAdapter(score, parent=lambda node: node.parent)
    pane = DetailPane()
    selection = TreeSelection(adapter)
    selection.subscribe(SelectionCoordinator(describe, pane.set_text).on_selection_changed)
    selection.select_trail(trail)
    return pane.text


def main(argv=None):
    """Run the command line interface; returns the exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    try:
        score = read.load(args.filename)
    except (OSError, UnicodeDecodeError) as e:
        message = getattr(e, 'strerror', None) or e
        print("scoretree: can't read {}: {}".format(args.filename, message), file=sys.stderr)
        return 1

    if args.dump:
        score.dump(sys.stdout, args.style)

    if args.select is not None:
        describe = dump.text_dump if args.text else dump.html_dump
        try:
            trail = parse_trail(args.select)
        except ValueError as e:
            print("scoretree: invalid trail {!r}: {}".format(args.select, e), file=sys.stderr)
            return 1
        try:
            text = select(score, trail, describe)
        except ProtocolViolation as e:
            print("scoretree: invalid trail {!r}: {}".format(args.select, e), file=sys.stderr)
            return 1
        print(text)

    if not args.dump and args.select is None:
        from . import qt
        return qt.run(score.name, score)
    return 0
