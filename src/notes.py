### this module contains the PitchClass and OctaveNote classes.
### PitchClasses are abstract notes in no particular octave, such as the note C.
### OctaveNotes are specific notes like the keys of a piano, such as C4 (aka middle C)

from . import parsing, _settings


class PitchClass:
    """a note/chroma/pitch-class defined in the abstract,
    i.e. not associated with a specific octave, such as: C or Eb.
    PitchClasses compare equal by chromatic position, so PitchClass('Db') == PitchClass('C#'),
    and are always displayed by the canonical spelling of their position."""
    def __init__(self, name=None, position=None):
        """a PitchClass can be initialised in one of two ways:
            1. by passing to 'name' a valid note name, such as C or D# or Ebb
            2. by passing to 'position' an integer between 0 and 11 (inclusive),
                denoting a semitone offset from C.
        an existing PitchClass (or OctaveNote) is also accepted as 'name', for re-casting."""
        if isinstance(name, PitchClass):
            position, name = name.position, None
        elif isinstance(name, int) and not isinstance(name, bool):
            # we've been passed a position int instead of a name, silently correct:
            position, name = name, None

        assert ((name is not None) + (position is not None) == 1), "Argument to PitchClass init must include exactly one of: name or position"

        if name is not None:
            if not isinstance(name, str):
                raise TypeError(f'expected str or int but received {type(name)} to initialise PitchClass object')
            if name not in parsing.note_positions:
                raise ValueError(f'Not a valid note name: {name}')
            position = parsing.note_positions[name]

        self.position = position % 12
        self.name = parsing.canonical_note_names[self.position]

    def __sub__(self, other):
        """returns the ascending semitone distance from other up to this note, mod 12"""
        other = PitchClass(other)
        return (self.position - other.position) % 12

    def __add__(self, semitones: int):
        return PitchClass(position=(self.position + semitones) % 12)

    def __eq__(self, other):
        if isinstance(other, str):
            if other not in parsing.note_positions:
                return False
            other = PitchClass(other)
        if not isinstance(other, PitchClass):
            return NotImplemented
        return self.position == other.position

    def __hash__(self):
        return hash(self.position)

    def __lt__(self, other):
        return self.position < PitchClass(other).position

    def __str__(self):
        return f'{self._marker}{self.name}'

    def __repr__(self):
        return str(self)

    _marker = _settings.MARKERS['PitchClass']


class OctaveNote(PitchClass):
    """a PitchClass that additionally lives in a specific octave,
    like the key of a piano. identified by its MIDI value, where C4 = 60.
    OctaveNotes compare equal to each other by MIDI value, but their hash and
    their position are those of their pitch class."""
    def __init__(self, name=None, value=None):
        if isinstance(name, OctaveNote):
            value, name = name.value, None
        elif isinstance(name, int) and not isinstance(name, bool):
            value, name = name, None

        assert ((name is not None) + (value is not None) == 1), "Argument to OctaveNote init must include exactly one of: name or value"

        if name is not None:
            if not isinstance(name, str):
                raise TypeError(f'expected str or int but received {type(name)} to initialise OctaveNote object')
            value = parsing.name_to_midi(name)

        self.value = int(value)
        self.octave, position = parsing.midi_to_oct_pos(self.value)
        super().__init__(position=position)

    @property
    def pitch_class(self):
        return PitchClass(position=self.position)

    @property
    def full_name(self):
        return f'{self.name}{self.octave}'

    def __eq__(self, other):
        if isinstance(other, OctaveNote):
            return self.value == other.value
        return super().__eq__(other)

    def __hash__(self):
        return hash(self.position)

    def __lt__(self, other):
        if isinstance(other, OctaveNote):
            return self.value < other.value
        return super().__lt__(other)

    def __str__(self):
        return f'{self._marker}{self.full_name}'

    _marker = _settings.MARKERS['OctaveNote']


def cast_note(note):
    """accepts a note in any of the forms understood by the recognizer and returns
    either a PitchClass (for octave-free input) or an OctaveNote (for input that
    carries an octave, i.e. names like 'E3', MIDI integers, or OctaveNote objects)."""
    if isinstance(note, PitchClass):
        return note
    elif isinstance(note, int) and not isinstance(note, bool):
        # bare ints are MIDI note numbers:
        return OctaveNote(value=note)
    elif isinstance(note, str):
        name = note.strip()
        if name in parsing.note_positions:
            return PitchClass(name)
        elif parsing.parse_octavenote_name(name) is not None:
            return OctaveNote(name)
        else:
            raise ValueError(f'Could not parse note: {note}')
    else:
        raise TypeError(f'Expected a note name, MIDI number or note object, but got: {type(note)}')
