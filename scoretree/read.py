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


r"""
Build a :class:`~.score.Score` from LilyPond music.

The text is lexed by *parce*'s LilyPond language definition, and the
resulting tree of contexts and tokens is walked by a :class:`ScoreBuilder`.
For example::

    >>> from scoretree import read
    >>> s = read.score(r"{ \clef bass \time 3/4 c4 <e g>2 | r2. }")
    >>> s.dump()
    <Score name=None (1 child)>
     ╰╴<Part name=None (1 child)>
        ╰╴<Staff number=1 (2 children)>
           ├╴<Measure number=1 (4 children)>
           │  ├╴<Clef shape='bass'>
           │  ├╴<TimeSignature numerator=3 denominator=4>
           │  ├╴<Chord duration=Fraction(1, 4) (1 child)>
           │  │  ╰╴<Note name='c' octave=0>
           │  ╰╴<Chord duration=Fraction(1, 2) (2 children)>
           │     ├╴<Note name='e' octave=0>
           │     ╰╴<Note name='g' octave=0>
           ╰╴<Measure number=2 (1 child)>
              ╰╴<Rest duration=Fraction(3, 4)>

Only a subset of LilyPond is understood; see :class:`ScoreBuilder`. Octaves
are read as absolute octaves, ``\relative`` is not interpreted.

"""

import logging
import os
import re

import parce
import parce.action as a
from parce.lang.lilypond import LilyPond
from parce.util import Dispatcher

from . import score as sc


logger = logging.getLogger(__name__)


#: Comments; never an argument of a command.
COMMENT_CONTEXTS = frozenset(('singleline_comment', 'multiline_comment'))

#: Contexts that never contain music for the score.
SKIPPED_CONTEXTS = COMMENT_CONTEXTS | frozenset((
    'header', 'paper', 'layout', 'midi', 'layout_context',
    'markup', 'markuplist', 'markupscore', 'scheme', 'schemelily', 'string',
    'identifier_ref', 'lyricmode', 'lyricsto', 'lyriclist', 'chordmode', 'chordlist',
    'figuremode', 'figurelist', 'drummode', 'drumlist', 'duration_scaling',
))

#: Modes accepted after ``\key <pitch>``.
KEY_MODES = frozenset((
    'major', 'minor', 'ionian', 'dorian', 'phrygian', 'lydian',
    'mixolydian', 'aeolian', 'locrian',
))


def _item_text(item):
    """Return the text of a token, or the joined text of all tokens in a context."""
    if item.is_token:
        return item.text
    return ''.join(t.text for t in item.tokens())


class ScoreBuilder:
    """Walks a parce tree of LilyPond music and builds a Score.

    Understood are: sequential (``{ }``) and simultaneous (``<< >>``) music,
    notes, chords (``< >``), chord repetition (``q``), rests, spacers,
    durations with dots, bar checks (``|``), ``\\clef``, ``\\key`` and
    ``\\time``. Each outermost ``{ }`` block starts a new staff; a bar check
    starts a new measure. Everything else is ignored.

    """

    _action = Dispatcher()
    _builtin = Dispatcher()

    def __init__(self, name=None):
        self.score = sc.Score(sc.Part(), name=name)
        self.part = self.score[0]
        self._staff = None
        self._measure = None
        self._implicit = False
        self._chord = None          # the chord being read between < and >
        self._previous = None       # the last chord, for q
        self._last = None           # the last item, that gets the next duration
        self._target = None         # the note that gets the next octave marks
        self._expect = []           # argument readers for a preceding command
        self._duration = sc.DEFAULT_DURATION
        self._duration_text = None
        self._dots = 0

    def finish(self):
        """Close the current staff and return the Score."""
        self.close_staff()
        if not len(self.part):
            self.open_staff()
            self.close_staff()
        return self.score

    ## walking the tree
    def read(self, context):
        """Read all tokens and child contexts of a parce context."""
        for item in context:
            if item.is_token:
                self.token(item)
            else:
                self.context(item)

    def token(self, token):
        """Handle a token, dispatching on its action."""
        if token.action is None or token.action in a.Comment:
            return
        elif self.expecting(token):
            return
        for action in token.action:
            meth = self._action.get(action)
            if meth:
                meth(token)
                return

    def context(self, context):
        """Handle a child context, dispatching on its lexicon name."""
        name = context.lexicon.name
        if name in COMMENT_CONTEXTS or self.expecting(context):
            return
        elif name in SKIPPED_CONTEXTS:
            return
        elif name == 'chord':
            self.read_chord(context)
        elif name == 'duration':
            self.read_duration(context)
        elif name == 'musiclist' and self.starts_staff(context):
            self.open_staff()
            self.read(context)
            self.close_staff()
        else:
            self.read(context)

    def expecting(self, item):
        """Return True if the item is consumed as argument of a preceding command."""
        while self._expect:
            reader = self._expect.pop(0)
            if reader(item):
                return True
        return False

    def starts_staff(self, context):
        """Return True if the context is a ``{ }`` block outside any staff."""
        if self._staff is not None and not self._implicit:
            return False
        return len(context) > 0 and context[0].is_token and context[0].text == '{'

    ## building the hierarchy
    def open_staff(self, implicit=False):
        """Start a new staff with an empty first measure."""
        self.close_staff()
        self._staff = sc.Staff(number=len(self.part) + 1)
        self.part.append(self._staff)
        self._implicit = implicit
        self._duration = sc.DEFAULT_DURATION
        self._duration_text = None
        self._dots = 0
        self.new_measure()

    def close_staff(self):
        """Close the current staff, dropping a trailing empty measure."""
        staff = self._staff
        if staff is not None and len(staff) > 1 and not len(staff[-1]):
            del staff[-1]
        self._staff = self._measure = self._last = self._target = None
        self._chord = self._previous = None
        self._implicit = False

    def new_measure(self):
        """Append a new measure to the current staff."""
        self._measure = sc.Measure(number=len(self._staff) + 1)
        self._staff.append(self._measure)

    def add(self, node):
        """Add a node to the current measure, starting a staff if needed."""
        if self._measure is None:
            self.open_staff(True)
        self._measure.append(node)

    def add_chord(self, *notes):
        """Add a new chord with the current duration."""
        chord = sc.Chord(*notes, duration=self._duration)
        self.add(chord)
        self._last = self._previous = chord
        return chord

    ## contexts
    def read_chord(self, context):
        """Read the notes of a ``< >`` chord."""
        previous = self._previous
        self._chord = chord = self.add_chord()
        self.read(context)
        self._chord = None
        if not len(chord):
            # <> is used to attach events; it is no music
            self._measure.remove(chord)
            self._last = None
            self._previous = previous

    def read_duration(self, context):
        """Read the dots (and possibly the duration) in a duration context."""
        for item in context:
            if not item.is_token:
                continue
            elif item.text == '.':
                self.add_dot()
            elif item.action in a.Number.Duration:
                self.set_duration(item.text)

    ## durations
    def set_duration(self, text):
        """Set a new duration, and apply it to the last item."""
        self._duration_text = text
        self._dots = 0
        self.apply_duration()

    def add_dot(self):
        """Add a dot to the current duration."""
        if self._duration_text is not None:
            self._dots += 1
            self.apply_duration()

    def apply_duration(self):
        try:
            value = sc.duration_from_string(self._duration_text, self._dots)
        except ValueError:
            logger.warning("ignoring invalid duration: %r", self._duration_text)
            return
        self._duration = value
        if self._last is not None:
            self._last.duration = value

    ## tokens
    @_action(a.Text.Music.Pitch.Octave)
    def octave_action(self, token):
        r"""Called for ``Text.Music.Pitch.Octave``."""
        if self._target is not None:
            self._target.octave += token.text.count("'") - token.text.count(",")

    @_action(a.Text.Music.Pitch.Octave.OctaveCheck, a.Text.Music.Pitch.Accidental)
    def ignore_action(self, token):
        r"""Called for octave checks and reminder accidentals."""

    @_action(a.Text.Music.Pitch, a.Name.Pitch)
    def pitch_action(self, token):
        r"""Called for ``Text.Music.Pitch (or Name.Pitch)``."""
        if token.text == 'q':
            self._target = None
            if self._previous is not None:
                self.add_chord(*(sc.Note(n.name, n.octave) for n in self._previous))
            return
        self._target = note = sc.Note(token.text)
        if self._chord is not None:
            self._chord.append(note)
        else:
            self.add_chord(note)

    @_action(a.Text.Music.Rest)
    def rest_action(self, token):
        r"""Called for ``Text.Music.Rest``; spacers only carry a duration."""
        self._target = None
        if token.text == 's':
            self._last = None
        else:
            self._last = rest = sc.Rest(self._duration)
            self.add(rest)

    @_action(a.Number.Duration)
    def duration_action(self, token):
        r"""Called for ``Number.Duration``."""
        if token.text == '.':
            self.add_dot()
        elif not token.text.startswith('*'):
            self.set_duration(token.text)

    @_action(a.Delimiter.Separator.PipeSymbol)
    def bar_action(self, token):
        r"""Called for ``Delimiter.Separator.PipeSymbol``, a bar check."""
        if self._measure is not None and len(self._measure):
            self.new_measure()
        self._last = self._target = None

    @_action(a.Name.Builtin)
    def builtin_action(self, token):
        r"""Called for any ``Name.Builtin`` token, e.g. ``\clef``."""
        self._target = None
        self._builtin(token.text, token)

    ## commands and their arguments
    @_builtin(r'\clef')
    def clef_command(self, token):
        def read_shape(item):
            shape = _item_text(item).strip('"')
            if shape:
                self.add(sc.Clef(shape))
                return True
        self._expect.append(read_shape)

    @_builtin(r'\key')
    def key_command(self, token):
        key = sc.KeySignature()
        def read_tonic(item):
            if item.is_token and item.text.isalpha():
                key.tonic = item.text
                self.add(key)
                self._expect[:0] = [self.skip_pitch_context, read_mode]
                return True
        def read_mode(item):
            mode = _item_text(item).lstrip('\\')
            if item.is_token and mode in KEY_MODES:
                key.mode = mode
                return True
        self._expect.append(read_tonic)

    @_builtin(r'\time')
    def time_command(self, token):
        def read_fraction(item):
            m = re.fullmatch(r'\s*(\d+)\s*/\s*(\d+)\s*', _item_text(item))
            if m:
                self.add(sc.TimeSignature(int(m.group(1)), int(m.group(2))))
                return True
        self._expect.append(read_fraction)

    @_builtin(r'\relative', r'\transpose')
    def pitch_argument_command(self, token):
        count = 2 if token.text == r'\transpose' else 1
        for _ in range(count):
            self._expect.extend((self.skip_pitch, self.skip_pitch_context))

    def skip_pitch(self, item):
        """Consume a pitch token that is an argument, not a note."""
        return item.is_token and item.action is not None and item.action in a.Text.Music.Pitch

    def skip_pitch_context(self, item):
        """Consume the octave marks belonging to an argument pitch."""
        return not item.is_token and item.lexicon.name == 'pitch'


def score(text, name=None):
    """Return a :class:`~.score.Score` built from the LilyPond text."""
    builder = ScoreBuilder(name)
    builder.read(parce.root(LilyPond.root, text))
    result = builder.finish()
    logger.debug("read score %r: %d staves", name, len(result[0]))
    return result


def load(filename, encoding=None):
    """Read a LilyPond file and return a :class:`~.score.Score`.

    The score is named after the file name without extension. Raises
    :class:`OSError` if the file can't be read.

    """
    with open(filename, encoding=encoding or 'utf-8') as f:
        text = f.read()
    name = os.path.splitext(os.path.basename(filename))[0]
    return score(text, name)
