import pytest

from .util import compare, log
from chordfinder.notes import PitchClass, OctaveNote, cast_note
from chordfinder import parsing
from chordfinder.util import rotate_list, longest_prefix, reverse_dict

def test_pitch_classes(verbose=False):
    log.verbose = verbose

    # enharmonic spellings are equal and collapse to the canonical spelling:
    compare(PitchClass('Db'), PitchClass('C#'))
    compare(PitchClass('Db').name, 'C#')
    compare(PitchClass('D#').name, 'Eb')
    compare(PitchClass('E#').name, 'F')
    compare(PitchClass('C♯').name, 'C#')
    compare(PitchClass('B♭').name, 'Bb')
    compare(PitchClass('Bbb').name, 'A')
    compare(PitchClass('Cb').position, 11)
    compare(PitchClass(position=15).name, 'Eb')
    compare(len({PitchClass('Db'), PitchClass('C#'), PitchClass('C#')}), 1)

    # comparison with strings:
    compare(PitchClass('Gb') == 'F#', True)
    compare(PitchClass('G') == 'not a note', False)

    # distances and transposition:
    compare(PitchClass('G') - PitchClass('C'), 7)
    compare(PitchClass('C') - 'G', 5)
    compare(PitchClass('A') + 3, PitchClass('C'))

    with pytest.raises(ValueError):
        PitchClass('H')
    with pytest.raises(TypeError):
        PitchClass(name=4.5)

    log.verbose = False

def test_octave_notes(verbose=False):
    log.verbose = verbose

    compare(OctaveNote('C4').value, 60)
    compare(OctaveNote(61).full_name, 'C#4')
    compare(OctaveNote('A-1').value, 9)
    # enharmonics across the octave boundary:
    compare(OctaveNote('Cb4').full_name, 'B3')
    compare(OctaveNote('B#3').value, 60)

    compare(OctaveNote('E3') < OctaveNote('C4'), True)
    compare(OctaveNote('C4') == OctaveNote('C5'), False)
    compare(OctaveNote('C4').pitch_class, PitchClass('C'))

    log.verbose = False

def test_cast_note():
    compare(type(cast_note('Eb')), PitchClass)
    compare(type(cast_note('Eb3')), OctaveNote)
    compare(type(cast_note(64)), OctaveNote)
    compare(cast_note(64).name, 'E')
    note = PitchClass('G')
    compare(cast_note(note) is note, True)

    with pytest.raises(ValueError):
        cast_note('X9')
    with pytest.raises(TypeError):
        cast_note(3.5)

def test_parsing():
    compare(parsing.canonical_name('D#'), 'Eb')
    compare(parsing.note_split('F#sus4'), ('F#', 'sus4'))
    compare(parsing.note_split('Ebm7'), ('Eb', 'm7'))
    compare(parsing.note_split('xyz', graceful_fail=True), False)
    with pytest.raises(ValueError):
        parsing.note_split('xyz')

    compare(parsing.parse_octavenote_name('Gb-1'), ('Gb', -1))
    compare(parsing.parse_octavenote_name('C'), None)
    compare(parsing.name_to_midi('A4'), 69)

    # chord degrees:
    compare(parsing.parse_degree('b7'), (7, 10))
    compare(parsing.parse_degree('#9'), (9, 15))
    compare(parsing.parse_degree('bb7'), (7, 9))
    compare(parsing.parse_degree('13'), (13, 21))
    compare(parsing.degree_value('13'), 9)
    compare(parsing.degree_value('#5'), 8)
    with pytest.raises(ValueError):
        parsing.parse_degree('b')
    with pytest.raises(ValueError):
        parsing.parse_degree('14')

def test_util():
    compare(rotate_list([0, 1, 2], 1), [1, 2, 0])
    compare(rotate_list(['a', 'b', 'c', 'd'], -1), ['d', 'a', 'b', 'c'])
    compare(longest_prefix('maj7#5', ['m', 'maj7', 'maj7#5']), 'maj7#5')
    compare(longest_prefix('sus4', ['', 'm']), None)
    compare(reverse_dict({'a': 1, 'b': [2, 3]}), {1: 'a', (2, 3): 'b'})

if __name__ == '__main__':
    test_pitch_classes(verbose=True)
    test_octave_notes(verbose=True)
