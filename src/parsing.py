#### string parsing functions
from .util import unpack_and_reverse_dict

################### accidentals

# map semitone offset values to accidental character aliases:
offset_accidentals = {-2: ['𝄫', '♭♭', 'bb'],
                -1: ['♭', 'b'],
                 0: ['', '♮'],
                 1: ['♯', '#'],
                 2: ['𝄪', '♯♯', '##']}
# map accidental aliases to offsets:
accidental_offsets = unpack_and_reverse_dict(offset_accidentals)

def begins_with_accidental(name: str):
    """checks if a string begins with an accidental substring.
        returns 1 for a single-char accidental (e.g. # or 𝄫), 2 for a two-character accidental (e.g. ## or bb)
        and False if not an accidental."""
    if len(name) >= 2 and name[:2] in accidental_offsets:
        return 2
    elif len(name) >= 1 and name[:1] in accidental_offsets and name[:1] != '':
        return 1
    else:
        return False


################### note names

# the canonical spelling of each of the 12 pitch classes, indexed by chromatic position (C=0).
# these are the spellings used everywhere in output; enharmonic inputs are cast onto them.
canonical_note_names = ['C', 'C#', 'D', 'Eb', 'E', 'F', 'F#', 'G', 'Ab', 'A', 'Bb', 'B']

natural_note_names = ['C', 'D', 'E', 'F', 'G', 'A', 'B']
# natural notes by their keyboard position, before any accidental is applied:
natural_note_values = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}

# map every spellable note name to its keyboard position (where C is 0),
# including enharmonics like Db, E#, Cb and double accidentals like Gbb:
note_positions = {}
# as above, but without wrapping around the octave, so that Cb is -1 and B# is 12:
note_raw_values = {}
for n in natural_note_names:
    for offset, accidentals in offset_accidentals.items():
        for acc in accidentals:
            acc_note_name = f'{n}{acc}' # e.g C# or D𝄫
            note_raw_values[acc_note_name] = natural_note_values[n] + offset
            note_positions[acc_note_name] = (natural_note_values[n] + offset) % 12


def is_valid_note_name(name: str):
    """returns True if string can be cast to a PitchClass,
    and False if it cannot (in which case it must be something else, like an OctaveNote)"""
    if not isinstance(name, str) or not (0 < len(name) < 4):
        return False
    return name in note_positions

def begins_with_valid_note_name(name: str):
    """checks if a string contains a valid note name in its first three characters.
    returns the length of the longest note name found there, or False if there is none."""
    for length in (3, 2, 1):
        if len(name) >= length and is_valid_note_name(name[:length]):
            return length
    return False

def note_split(name, graceful_fail=False, strip=True):
    """takes a string that contains a note in its first few characters
    (like the name of a chord, e.g. F#sus4)
    splits out the note name, and returns it along with the remaining substring
    as a (note_name, remainder) tuple.
    if graceful_fail, returns False on failure to parse instead of raising error.
    if strip, strips whitespace from the remainder string before returning."""
    note_idx = begins_with_valid_note_name(name)
    if note_idx is False:
        if graceful_fail:
            return False
        else:
            raise ValueError(f'No valid note name found in first 3 characters of: {name}')
    note_name, remainder = name[:note_idx], name[note_idx:]
    if strip:
        remainder = remainder.strip()
    return note_name, remainder

def canonical_name(name):
    """casts any valid note name (e.g. 'Db', 'C♯', 'E#') to the canonical spelling
    of its pitch class (e.g. 'C#', 'C#', 'F')"""
    if name not in note_positions:
        raise ValueError(f'Not a valid note name: {name}')
    return canonical_note_names[note_positions[name]]

def parse_octavenote_name(name):
    """Takes the name of an OctaveNote as a string,
    for example 'C4' or 'A#3' or 'Gb-1',
    and extracts the note and octave components.
    returns None if the string does not end in an octave number."""
    note_len = begins_with_valid_note_name(name)
    if note_len is False:
        return None
    note_name, octave_str = name[:note_len], name[note_len:]
    if octave_str.startswith('-'):
        digits = octave_str[1:]
    else:
        digits = octave_str
    if len(digits) == 0 or not digits.isdigit():
        return None
    return note_name, int(octave_str)


################### MIDI conversion:

# MIDI note 60 is middle C, i.e. C4
def midi_to_oct_pos(value):
    """splits a MIDI note number into an (octave, position) pair"""
    value = int(value)
    return (value // 12) - 1, value % 12

def name_to_midi(name):
    """returns the MIDI note number of an OctaveNote name like 'E3'.
    enharmonics are respected across octave boundaries: Cb4 is the same key as B3."""
    parsed = parse_octavenote_name(name)
    if parsed is None:
        raise ValueError(f'Could not parse OctaveNote name: {name}')
    note_name, octave = parsed
    return ((octave + 1) * 12) + note_raw_values[note_name]


################### chord degrees:

# semitone distance from the root of each (unaltered) chord degree,
# as in the major scale, extended upward past the octave:
degree_values = {1: 0, 2: 2, 3: 4, 4: 5, 5: 7, 6: 9, 7: 11,
                 8: 12, 9: 14, 10: 16, 11: 17, 12: 19, 13: 21}

def parse_degree(degree_str):
    """parses a chord degree string like '3', 'b3', '#5', 'bb7' or '13'
    into a (degree, semitones) tuple, where semitones is the (non-wrapped)
    distance of that degree above the chord root.
    e.g. 'b7' -> (7, 10), '#9' -> (9, 15), 'bb7' -> (7, 9)"""
    if not isinstance(degree_str, str):
        raise TypeError(f'expected degree string but got: {type(degree_str)}')
    acc_idx = begins_with_accidental(degree_str)
    if acc_idx is False:
        acc_idx = 0
    acc, number = degree_str[:acc_idx], degree_str[acc_idx:]
    if not number.isdigit() or int(number) not in degree_values:
        raise ValueError(f'Not a valid chord degree: {degree_str}')
    degree = int(number)
    return degree, degree_values[degree] + accidental_offsets[acc]

def degree_value(degree_str):
    """semitone offset of a chord degree string, wrapped to within one octave"""
    return parse_degree(degree_str)[1] % 12
