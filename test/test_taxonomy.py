import copy
from types import SimpleNamespace

import pytest

from .util import compare, log
from chordfinder.taxonomy import Taxonomy, TAXONOMY, default_option
from chordfinder.chords import ChordTemplate
from chordfinder.config import def_taxonomy
from chordfinder.util import MusicError

def _config_copy():
    """a deep copy of the taxonomy config tables that a test can safely modify"""
    tables = ['roots', 'intervals', 'triad_qualities', 'extension_categories', 'base_chord_degrees',
              'alteration_categories', 'inversions', 'modes']
    return SimpleNamespace(**{name: copy.deepcopy(getattr(def_taxonomy, name)) for name in tables})

def test_intervals(verbose=False):
    log.verbose = verbose
    compare(len(TAXONOMY.intervals), 13)
    # exactly one interval per semitone class:
    for n in range(12):
        compare(TAXONOMY.interval_by_semitones(n).semitones % 12, n)
    compare(TAXONOMY.interval_by_semitones(0).key, 'unison')
    compare(TAXONOMY.interval_by_semitones(12).key, 'unison')
    compare(TAXONOMY.interval_by_semitones(7).symbol, 'P5')
    compare(TAXONOMY.interval_by_semitones(-1).key, 'major7th')
    compare(TAXONOMY.intervals['octave'].compound, True)
    compare(TAXONOMY.intervals['octave'].mod, 0)
    compare(str(TAXONOMY.intervals['tritone']), '‹Tritone›')
    log.verbose = False

def test_templates():
    compare(TAXONOMY.template_by_key['dom9'].offsets, (0, 2, 4, 7, 10))
    compare([t.family for t in TAXONOMY.templates[:6]], ['triad'] * 6)
    compare(TAXONOMY.templates[0].key, 'major')
    compare(4 in TAXONOMY.template_by_key['major'], True)
    compare(16 in TAXONOMY.template_by_key['major'], True)
    compare(len(TAXONOMY.template_by_key['maj7']), 4)
    compare(list(TAXONOMY.template_by_key['minor'].vector.nonzero()[0]), [0, 3, 7])

    with pytest.raises(MusicError):
        ChordTemplate(key='rootless', offsets=[4, 7], suffix='', name='rootless', family='triad')

def test_immutability():
    with pytest.raises(TypeError):
        TAXONOMY.triads['power'] = None
    with pytest.raises(TypeError):
        TAXONOMY.extension_categories['7th'].options['dominant7'] = None

def test_lookups():
    compare(TAXONOMY.resolve_variant('ninth').key, 'dominant')
    compare(TAXONOMY.resolve_variant('ninth', 'minor').symbol, 'm9')
    compare(TAXONOMY.resolve_variant('thirteenth', 'bogus').key, 'dominant')
    compare(TAXONOMY.resolve_variant('sixth'), None)
    compare(TAXONOMY.alteration('#5') is TAXONOMY.alteration('sharp5'), True)
    compare(TAXONOMY.alteration('#3'), None)
    compare(TAXONOMY.extension_option('7th', 'halfDiminished7').symbol, 'm7b5')
    compare(TAXONOMY.extension_option('9th', 'dominant7'), None)

def test_applicability():
    compare(TAXONOMY.available_extensions('diminished'), ['none', '7th'])
    compare(TAXONOMY.available_extensions('major'), ['none', '6th', '7th', 'extended', 'added'])
    compare(TAXONOMY.available_extensions('bogus'), [])
    compare(list(TAXONOMY.available_sevenths('diminished')), ['diminished7', 'halfDiminished7'])
    compare(list(TAXONOMY.available_sevenths('minor')), ['minor7', 'minorMajor7'])
    compare(list(TAXONOMY.available_sixths('diminished')), [])
    compare(list(TAXONOMY.available_extended('suspended4')), ['eleventh'])
    compare('add9' in TAXONOMY.available_added('augmented'), True)
    compare(list(TAXONOMY.available_alterations()), ['fifth', 'eleventh', 'thirteenth'])
    compare('ninth' in TAXONOMY.available_alterations('extended'), True)
    compare(list(TAXONOMY.available_inversions('none')), ['root', 'first', 'second', 'slash'])
    compare('third' in TAXONOMY.available_inversions('7th'), True)

def test_defaults():
    compare(default_option(TAXONOMY.triads), 'major')
    compare(default_option(TAXONOMY.extension_categories['7th'].options), 'dominant7')
    # no flagged default falls back to the first option:
    compare(default_option(TAXONOMY.extension_categories['6th'].options), 'sixth')
    compare(default_option({}), None)

def test_validation():
    # the default config builds cleanly:
    compare(len(Taxonomy.from_config().templates), len(TAXONOMY.templates))

    defs = _config_copy()
    defs.triad_qualities['minor']['is_default'] = True
    with pytest.raises(MusicError):
        Taxonomy.from_config(taxonomy_defs=defs)

    defs = _config_copy()
    defs.triad_qualities['major']['available_extensions'].append('12th')
    with pytest.raises(MusicError):
        Taxonomy.from_config(taxonomy_defs=defs)

    defs = _config_copy()
    del defs.intervals['tritone']
    with pytest.raises(MusicError):
        Taxonomy.from_config(taxonomy_defs=defs)
