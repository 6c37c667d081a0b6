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
Describe a node for the detail view.

:func:`html_dump` returns a small HTML document with the class name and the
attributes of a node; :func:`text_dump` returns the same information as
plain text. Both can be given to a
:class:`~scoretree.selection.SelectionCoordinator` as the ``describe``
function.

Nodes having a ``fields()`` method (like all :class:`~scoretree.node.Node`
subclasses) are described using that method, other objects using their
public instance attributes.

"""

import fractions
import html


def fields(node):
    """Return a list of (name, value) tuples describing the node."""
    method = getattr(node, 'fields', None)
    if callable(method):
        return list(method())
    attrs = getattr(node, '__dict__', {})
    return [(name, value) for name, value in attrs.items() if not name.startswith('_')]


def format_value(value):
    """Return a readable string for an attribute value."""
    if value is None:
        return '-'
    elif isinstance(value, fractions.Fraction):
        return str(value)
    elif isinstance(value, str):
        return value
    return repr(value)


def _child_count(node):
    try:
        return len(node)
    except TypeError:
        return 0


def html_dump(node):
    """Return an HTML description of the node."""
    lines = ['<h3>{}</h3>'.format(html.escape(type(node).__name__))]
    f = fields(node)
    if f:
        lines.append('<table>')
        for name, value in f:
            lines.append('<tr><th align="left">{}</th><td>{}</td></tr>'.format(
                html.escape(name), html.escape(format_value(value))))
        lines.append('</table>')
    count = _child_count(node)
    lines.append('<p>{} child{}</p>'.format(count, '' if count == 1 else 'ren'))
    return '\n'.join(lines)


def text_dump(node):
    """Return a plain text description of the node."""
    lines = [type(node).__name__]
    lines.extend('  {}: {}'.format(name, format_value(value)) for name, value in fields(node))
    lines.append('  children: {}'.format(_child_count(node)))
    return '\n'.join(lines)


def label(node):
    """Return a short label for the node in a tree view, e.g. ``'Measure 3'``."""
    name = type(node).__name__
    for field, value in fields(node):
        if value is not None:
            return '{} {}'.format(name, format_value(value))
        break
    return name
