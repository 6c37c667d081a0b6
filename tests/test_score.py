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
Test the score module.
"""

from fractions import Fraction

import pytest

### find scoretree
import sys
sys.path.insert(0, '.')

from scoretree.score import *


def test_main():
    assert duration_from_string("4") == Fraction(1, 4)
    assert duration_from_string("8") == Fraction(1, 8)
    assert duration_from_string("2...") == Fraction(15, 16)
    assert duration_from_string("4", dotcount=1) == Fraction(3, 8)
    assert duration_from_string(" \\longa ") == 4
    assert duration_from_string("breve") == 2
    assert duration_from_string("\\maxima") == 8
    assert duration_from_string("1") == 1

    assert duration_to_string(Fraction(1, 4)) == "4"
    assert duration_to_string(Fraction(3, 8)) == "4."
    assert duration_to_string(Fraction(7, 16)) == "4.."
    assert duration_to_string(1) == "1"
    assert duration_to_string(2) == "\\breve"

    for text in ("3", "0", "quarter", ""):
        with pytest.raises(ValueError):
            duration_from_string(text)


def test_hierarchy():
    s = Score(
        Part(
            Staff(
                Measure(
                    Clef('bass'),
                    KeySignature('g'),
                    TimeSignature(3, 4),
                    Chord(Note('g', -1), Note('b', -1), duration=Fraction(1, 2)),
                    Rest(),
                ),
            ),
            name="Piano",
        ),
        name="Menuet",
    )
    measure = s[0][0][0]
    assert measure.duration() == Fraction(3, 4)
    assert measure.duration() == measure[2].measure_length()
    assert Measure().duration() == 0
    assert list(s.fields()) == [('name', 'Menuet')]
    assert list(measure[1].fields()) == [('tonic', 'g'), ('mode', 'major')]
    assert list(measure[3][0].fields()) == [('name', 'g'), ('octave', -1)]
    assert measure[3][1].parent is measure[3]
    assert measure.parent.parent.parent is s
    assert repr(measure[0]) == "<Clef shape='bass'>"
    assert all(isinstance(n, ScoreNode) for n in (s, s[0], s[0][0], measure))



if __name__ == "__main__" and 'test_main' in globals():
    test_main()

