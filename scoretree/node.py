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
This module defines a :class:`Node` class, the building block of the score
hierarchy.

A Node is a Python :class:`list` of child nodes, with a weakly referenced
parent. Subclasses add their own attributes and report them via
:meth:`Node.fields`, so that describers can display a node without knowing
its type.

"""

import weakref


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
    "double":  (" ║ ", "   ", " ╠═", " ╚═"),
    "thick":   (" ┃ ", "   ", " ┣╸", " ┗╸"),
    "flat":    ("│", " ", "├", "╰"),
}

DUMP_STYLE_DEFAULT = "round"


_NO_PARENT = lambda: None


class Node(list):
    """Node implements a simple tree type, based on Python :class:`list`.

    Iterating over a node yields the child nodes, just like the underlying
    list. A node always evaluates to True, even if it has no children.

    The parent is referred to with a weak reference, so a tree does not
    contain circular references; keep a reference to the root node as long as
    you use the tree. Adding nodes sets their parent; removing nodes does not
    unset it.

    Nodes compare by identity, which makes ``node.index(child)`` safe (but
    linear).

    Subclasses list their public attributes in ``__slots__`` and get a
    :meth:`fields` implementation and a readable :func:`repr` for free.

    """

    __slots__ = ('__weakref__', '_parent')

    def __init__(self, *children):
        """Constructor.

        If children are given they are appended to the list, and their parent
        is set to this node.

        """
        self._parent = _NO_PARENT
        if children:
            list.extend(self, children)
            for node in self:
                node._parent = weakref.ref(self)

    def __repr__(self):
        def result():
            yield type(self).__name__
            for name, value in self.fields():
                yield "{}={!r}".format(name, value)
            if len(self):
                yield "({} child{})".format(len(self), '' if len(self) == 1 else 'ren')
        return "<{}>".format(" ".join(result()))

    def __bool__(self):
        """Always True."""
        return True

    __hash__ = object.__hash__

    def __eq__(self, other):
        """Identity compare to make Node.index robust and "faster"."""
        return self is other

    def __ne__(self, other):
        """Identity compare to make Node.index robust and "faster"."""
        return self is not other

    @property
    def parent(self):
        """The parent Node or None; uses a weak reference."""
        return self._parent()

    @classmethod
    def field_names(cls):
        """Return the names of the public attributes, in definition order.

        The names are collected from the ``__slots__`` of the class and its
        bases, most basic class first; names starting with an underscore are
        skipped.

        """
        names = []
        for c in reversed(cls.__mro__):
            slots = c.__dict__.get('__slots__', ())
            if isinstance(slots, str):
                slots = (slots,)
            names.extend(s for s in slots if not s.startswith('_') and s not in names)
        return names

    def fields(self):
        """Yield (name, value) tuples for the public attributes of this node."""
        for name in self.field_names():
            yield name, getattr(self, name, None)

    def append(self, node):
        """Append node to this node; the parent is set to this node."""
        node._parent = weakref.ref(self)
        list.append(self, node)

    def is_last(self):
        """Return True if this is the last node. Fails if no parent."""
        return self.parent[-1] is self

    def dump(self, file=None, style=None, depth=0):
        """Display a graphical representation of the node and its contents.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        i = 2
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        prefix = []
        node = self
        for _ in range(depth):
            prefix.append(d[i + int(node.is_last())])
            node = node.parent
            i = 0
        print(''.join(reversed(prefix)) + repr(self), file=file)
        for n in self:
            n.dump(file, style, depth + 1)
