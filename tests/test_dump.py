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
Test the describers in the dump module.
"""

from fractions import Fraction

### find scoretree
import sys
sys.path.insert(0, '.')

from scoretree import dump
from scoretree.score import Chord, Measure, Note, Score


class Plain:
    def __init__(self):
        self.title = "<Title & Co>"
        self._private = 1


def test_main():
    chord = Chord(Note('c'), Note('e'), duration=Fraction(3, 8))
    assert dump.html_dump(chord) == '\n'.join((
        '<h3>Chord</h3>',
        '<table>',
        '<tr><th align="left">duration</th><td>3/8</td></tr>',
        '</table>',
        '<p>2 children</p>',
    ))
    assert dump.text_dump(chord) == "Chord\n  duration: 3/8\n  children: 2"
    assert dump.text_dump(Note('fis', 1)) == "Note\n  name: fis\n  octave: 1\n  children: 0"


def test_escaping():
    s = Score(name="<b>Bold</b>")
    text = dump.html_dump(s)
    assert "<b>" not in text
    assert "&lt;b&gt;Bold&lt;/b&gt;" in text
    assert dump.html_dump(Plain()).count("&amp;") == 1
    assert "_private" not in dump.html_dump(Plain())
    assert dump.text_dump(Plain()) == "Plain\n  title: <Title & Co>\n  children: 0"


def test_label():
    assert dump.label(Measure(number=3)) == "Measure 3"
    assert dump.label(Chord(duration=Fraction(1, 4))) == "Chord 1/4"
    assert dump.label(Score()) == "Score"
    assert dump.label(Score(name="Song")) == "Score Song"
    assert dump.format_value(None) == "-"
    assert dump.format_value(3) == "3"



if __name__ == "__main__" and 'test_main' in globals():
    test_main()

