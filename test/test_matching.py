import pytest

from .util import compare, log
from chordfinder.matching import (recognise, identify_interval, match_template, detect_inversion,
                                  search_term, parse_search_query)
from chordfinder.notes import PitchClass, OctaveNote
from chordfinder.selection import TaxonomySelection
from chordfinder.taxonomy import TAXONOMY
from chordfinder.naming import build_symbol
from chordfinder.parsing import canonical_note_names

def test_trivial_inputs(verbose=False):
    log.verbose = verbose

    compare(recognise([]), None)

    single = recognise(['C'])
    compare(single.chord_type, 'single')
    compare(single.symbol, 'C')
    compare(single.description, 'C (single note)')
    compare(single.inversion, 'root')
    compare(single.to_selection(), TaxonomySelection(root='C'))
    # repeated notes are one note:
    compare(recognise(['Db', 'C#', 'C#5']).chord_type, 'single')

    log.verbose = False

def test_intervals():
    desc = recognise(['E', 'C'])
    compare(desc.notes, ('C', 'E'))
    compare(desc.symbol, 'C M3')
    compare(desc.base_chord, 'C M3')
    compare(desc.description, 'C E (major 3rd)')
    compare(desc.chord_type, 'interval')
    compare(desc.interval_type, 'major3rd')
    compare(desc.is_chord, False)
    compare(desc.inversion, 'root')
    compare(recognise(['C', 'E'], root_agnostic=True).symbol, 'M3')
    compare(build_symbol(desc.to_selection()), 'C M3')

    # every pair is recognised the same in either order, and agrees with the interval table:
    for a in canonical_note_names:
        for b in canonical_note_names:
            if a == b:
                continue
            ab, ba = recognise([a, b]), recognise([b, a])
            compare((ab.symbol, ab.interval_type, ab.notes), (ba.symbol, ba.interval_type, ba.notes))
            lower, upper = ab.notes
            semitones = (PitchClass(upper).position - PitchClass(lower).position + 12) % 12
            compare(TAXONOMY.intervals[ab.interval_type], TAXONOMY.interval_by_semitones(semitones))

def test_major_triads():
    # every root position major triad, given root first:
    for root in canonical_note_names:
        root_pc = PitchClass(root)
        notes = [root, (root_pc + 4).name, (root_pc + 7).name]
        desc = recognise(notes)
        compare((desc.symbol, desc.chord_type, desc.inversion), (root, 'major', 'root'))

def test_triad_rotations(verbose=False):
    log.verbose = verbose
    # every voicing of every major and minor triad is found on its true root, with the first note as bass:
    for root in canonical_note_names:
        root_pc = PitchClass(root)
        for quality, third in (('major', 4), ('minor', 3)):
            tones = [root, (root_pc + third).name, (root_pc + 7).name]
            for rotation, label in enumerate(['root', '1st inversion', '2nd inversion']):
                voicing = tones[rotation:] + tones[:rotation]
                desc = recognise(voicing)
                compare((desc.root, desc.chord_type, desc.bass, desc.inversion),
                        (root, quality, voicing[0], label))
    log.verbose = False

def test_ambiguous_voicings():
    # stacked from the bass this reads B-D-E-G, but roots are tried chromatically upward from B,
    # so E minor (B, D, E) is found before G major (B, D, E, G):
    desc = recognise(['B', 'G', 'D', 'E'])
    compare((desc.root, desc.chord_type, desc.bass), ('E', 'minor', 'B'))
    compare(desc.inversion, '2nd inversion')
    compare(desc.symbol, 'Em (2nd inversion)')
    # the same pitch classes over a G bass resolve to G:
    compare(recognise(['G', 'B', 'D', 'E']).symbol, 'G')

def test_inversions():
    first = recognise(['E', 'G', 'C'])
    compare(first.root, 'C')
    compare(first.chord_type, 'major')
    compare(first.inversion, '1st inversion')
    compare(first.symbol, 'C (1st inversion)')
    compare(first.description, 'C major (1st inversion)')
    compare(first.base_chord, 'C')
    compare(first.bass, 'E')
    compare(first.notes, ('C', 'E', 'G'))
    compare(first.is_chord, True)
    compare(list(first.chroma.nonzero()[0]), [0, 4, 7])

    second = recognise(['G', 'C', 'E'])
    compare(second.inversion, '2nd inversion')
    compare(second.symbol, 'C (2nd inversion)')

    # octave information decides the bass, whatever the input order:
    compare(recognise(['C4', 'G4', 'E3']).inversion, '1st inversion')
    compare(recognise(['C4', 'E4', 'G3']).inversion, '2nd inversion')
    compare(recognise([60, 64, 55]).symbol, 'C (2nd inversion)')
    compare(recognise([OctaveNote('E2'), OctaveNote('C3'), OctaveNote('G3')]).inversion, '1st inversion')

    # agnostic flags:
    compare(recognise(['E', 'G', 'C'], inversion_agnostic=True).symbol, 'C')
    compare(recognise(['E', 'G', 'C'], inversion_agnostic=True).inversion, '1st inversion')
    compare(recognise(['E', 'G', 'C'], root_agnostic=True).symbol, 'major (1st inversion)')
    compare(recognise(['E', 'G', 'C'], root_agnostic=True, inversion_agnostic=True).symbol, 'major')

    compare(recognise(['E', 'G', 'C']).to_selection(),
            TaxonomySelection(root='C', type='chord', triad='major', extension_category='none', inversion='first'))

def test_template_priority():
    # triads come first in the template table, so they win over larger chords on the same root:
    compare(recognise(['C', 'E', 'G', 'Bb']).symbol, 'C')
    compare(recognise(['C', 'E', 'G', 'Bb'], most_specific=True).symbol, 'C7')
    compare(recognise(['A', 'C', 'E', 'G']).symbol, 'Am')
    compare(recognise(['A', 'C', 'E', 'G'], most_specific=True).symbol, 'Am7')
    compare(recognise(['C', 'E', 'G', 'B', 'D'], most_specific=True).symbol, 'Cmaj9')
    compare(recognise(['B', 'D', 'F', 'A'], most_specific=True).symbol, 'Bm7b5')
    compare(recognise(['Db', 'F', 'Ab']).symbol, 'C#')

    # a 7th in the bass is a slash chord over a plain triad, but a 3rd inversion of a 7th chord:
    compare(recognise(['Bb', 'C', 'E', 'G']).inversion, 'slash chord')
    compare(recognise(['Bb', 'C', 'E', 'G']).symbol, 'C (slash chord)')
    seventh = recognise(['Bb', 'C', 'E', 'G'], most_specific=True)
    compare(seventh.symbol, 'C7 (3rd inversion)')
    compare(seventh.to_selection(),
            TaxonomySelection(root='C', type='chord', triad='major', extension_category='7th',
                              specific_extension='dominant7', inversion='third'))

    # repeated notes don't change anything:
    compare(recognise(['C', 'E', 'G', 'C', 'E']).symbol, 'C')

def test_unknown_chords():
    desc = recognise(['C', 'C#', 'D'])
    compare(desc.chord_type, 'unknown')
    compare(desc.symbol, 'CC#D')
    compare(desc.description, 'C C# D')
    compare(desc.to_selection(), None)
    compare(desc.to_dict()['chordType'], 'unknown')

    # unmatched notes are reported in input order, repeats included:
    repeated = recognise(['C', 'D', 'C#', 'D'])
    compare(repeated.chord_type, 'unknown')
    compare(repeated.symbol, 'CDC#D')
    compare(repeated.description, 'C D C# D')
    compare(repeated.base_chord, 'CDC#D')
    compare(repeated.notes, ('C', 'C#', 'D'))
    compare(recognise(['Db', 'D', 'C']).symbol, 'C#DC')

    with pytest.raises(ValueError):
        recognise(['C', 'E', 'Q'])

def test_helpers():
    compare(identify_interval('C', 'G').key, 'perfect5th')
    compare(identify_interval('G', 'C').key, 'perfect4th')
    compare(identify_interval('C', 'C4').key, 'unison')

    compare(match_template([0, 4, 7]).key, 'major')
    compare(match_template([0, 4, 7, 11]).key, 'major')
    compare(match_template([0, 4, 7, 11], most_specific=True).key, 'maj7')
    compare(match_template([0, 1]), None)

    major = TAXONOMY.template_by_key['major']
    compare(detect_inversion('C', 'C', major), 'root')
    compare(detect_inversion('C', 'E', major), '1st inversion')
    compare(detect_inversion('C', 'G', major), '2nd inversion')
    compare(detect_inversion('C', 'B', major), 'slash chord')
    compare(detect_inversion('C', 'B', TAXONOMY.template_by_key['maj7']), '3rd inversion')
    compare(detect_inversion('C', 'D', major), 'slash chord')

def test_search():
    first = recognise(['E', 'G', 'C'])
    compare(search_term(first), 'C (1st inversion)')
    compare(search_term(first, inversion_agnostic=True), 'C')
    compare(search_term(first, root_agnostic=True), 'major')
    compare(search_term(recognise(['C', 'G']), root_agnostic=True), 'P5')

    compare(parse_search_query('   '), None)
    query = parse_search_query(' Cm7 ')
    compare((query.root, query.chord_type, query.description, query.notes), ('C', 'm7', 'Search: Cm7', ()))
    compare(parse_search_query('Eb').chord_type, 'major')
    free_text = parse_search_query('dusty piano')
    compare((free_text.chord_type, free_text.root, free_text.symbol), ('search', None, 'dusty piano'))
    compare('root' in free_text.to_dict(), False)
