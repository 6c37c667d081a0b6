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
The score hierarchy.

A :class:`Score` contains parts, a part contains staves, a staff contains
measures, and a measure contains the musical items: clefs, key and time
signatures, chords (which contain notes) and rests. For example::

    >>> from scoretree.score import *
    >>> s = Score(Part(Staff(Measure(Clef('bass'), Chord(Note('c'), Note('e'))))))
    >>> s.dump()
    <Score name=None (1 child)>
     ╰╴<Part name=None (1 child)>
        ╰╴<Staff number=1 (1 child)>
           ╰╴<Measure number=1 (2 children)>
              ├╴<Clef shape='bass'>
              ╰╴<Chord duration=Fraction(1, 4) (2 children)>
                 ├╴<Note name='c' octave=0>
                 ╰╴<Note name='e' octave=0>

A duration is a :class:`~fractions.Fraction` where a whole note is 1, the
same way LilyPond handles durations.

"""

import fractions
import math

from .node import Node


NAMED_DURATIONS = ('breve', 'longa', 'maxima')

#: The duration of a chord or rest when none is specified.
DEFAULT_DURATION = fractions.Fraction(1, 4)


def duration_from_string(text, dotcount=None):
    r"""Convert a LilyPond duration string (e.g. ``'4.'``) to a Fraction.

    The durations ``\breve``, ``\longa`` and ``\maxima`` may be used with or
    without backslash. If ``dotcount`` is None, the dots are expected to be in
    the ``text``::

        >>> duration_from_string('8..')
        Fraction(7, 32)
        >>> duration_from_string('breve')
        Fraction(2, 1)

    Raises a ValueError if an invalid duration is specified.

    """
    if dotcount is None:
        dotcount = text.count('.')
    text = text.strip(' \t.')
    if text.isdigit():
        value = int(text)
        if value < 1 or value & (value - 1):
            raise ValueError("not a power of two: {}".format(text))
        log = value.bit_length() - 1
    else:
        try:
            log = -1 - NAMED_DURATIONS.index(text.lstrip('\\'))
        except ValueError:
            raise ValueError("invalid duration: {!r}".format(text)) from None
    numer = ((2 << dotcount) - 1) << 3
    denom = 1 << (dotcount + log + 3)
    return fractions.Fraction(numer, denom)


def duration_to_string(value):
    r"""Convert a duration value to LilyPond notation.

    The value is truncated to a duration that can be expressed by a note
    length and a number of dots::

        >>> duration_to_string(Fraction(3, 8))
        '4.'
        >>> duration_to_string(2)
        '\\breve'

    """
    mantisse, exponent = math.frexp(value)
    dotcount = int(-1 - math.log2(1 - mantisse))
    log = 1 - exponent
    if log < 0:
        dur = '\\' + NAMED_DURATIONS[-1-log]
    else:
        dur = 1 << log
    return '{}{}'.format(dur, '.' * dotcount)


class ScoreNode(Node):
    """Base class for all nodes in the score hierarchy."""
    __slots__ = ()


class Score(ScoreNode):
    """The root of a score hierarchy; contains Part nodes."""
    __slots__ = ('name',)

    def __init__(self, *children, name=None):
        super().__init__(*children)
        self.name = name


class Part(ScoreNode):
    """A part (e.g. an instrument); contains Staff nodes."""
    __slots__ = ('name',)

    def __init__(self, *children, name=None):
        super().__init__(*children)
        self.name = name


class Staff(ScoreNode):
    """A staff; contains Measure nodes. The ``number`` counts from 1."""
    __slots__ = ('number',)

    def __init__(self, *children, number=1):
        super().__init__(*children)
        self.number = number


class Measure(ScoreNode):
    """A measure; contains the musical items. The ``number`` counts from 1."""
    __slots__ = ('number',)

    def __init__(self, *children, number=1):
        super().__init__(*children)
        self.number = number

    def duration(self):
        """Return the summed duration of the chords and rests in this measure."""
        return sum((n.duration for n in self if isinstance(n, (Chord, Rest))),
                   fractions.Fraction(0))


class Clef(ScoreNode):
    """A clef, e.g. ``'treble'`` or ``'bass'``."""
    __slots__ = ('shape',)

    def __init__(self, shape='treble'):
        super().__init__()
        self.shape = shape


class KeySignature(ScoreNode):
    """A key signature: the tonic note name and the mode."""
    __slots__ = ('tonic', 'mode')

    def __init__(self, tonic='c', mode='major'):
        super().__init__()
        self.tonic = tonic
        self.mode = mode


class TimeSignature(ScoreNode):
    """A time signature, e.g. 3/4."""
    __slots__ = ('numerator', 'denominator')

    def __init__(self, numerator=4, denominator=4):
        super().__init__()
        self.numerator = numerator
        self.denominator = denominator

    def measure_length(self):
        """Return the length of a full measure as a Fraction."""
        return fractions.Fraction(self.numerator, self.denominator)


class Chord(ScoreNode):
    """One or more notes sounding together; contains Note nodes.

    A single note in the music also becomes a Chord with one Note.

    """
    __slots__ = ('duration',)

    def __init__(self, *children, duration=DEFAULT_DURATION):
        super().__init__(*children)
        self.duration = duration


class Note(ScoreNode):
    """A note: the note name (e.g. ``'fis'``) and the octave.

    Octave 0 is the octave below middle C, as in LilyPond's absolute
    mode, where ``c'`` (octave 1) is middle C.

    """
    __slots__ = ('name', 'octave')

    def __init__(self, name='c', octave=0):
        super().__init__()
        self.name = name
        self.octave = octave


class Rest(ScoreNode):
    """A rest."""
    __slots__ = ('duration',)

    def __init__(self, duration=DEFAULT_DURATION):
        super().__init__()
        self.duration = duration
