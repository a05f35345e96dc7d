### this module contains the ChordTemplate and ChordDescriptor classes.
### ChordTemplates are abstract chord shapes: sets of semitone offsets above some root,
###     used by the recognizer to identify chords from notes.
### ChordDescriptors are the output of both the recognizer and the symbol builder:
###     a finished, immutable description of one chord or interval on a specific root.

from dataclasses import dataclass, field
from functools import cached_property
from typing import Optional

import numpy as np

from .notes import PitchClass
from .selection import TaxonomySelection
from .util import MusicError
from . import _settings


# the inversion labels reported on descriptors, keyed by the offset of the bass note above the root.
# any bass offset not listed here makes a slash chord:
inversion_labels = {3: '1st inversion', 4: '1st inversion',
                    7: '2nd inversion',
                    10: '3rd inversion', 11: '3rd inversion'}
ROOT_POSITION = 'root'
SLASH_CHORD = 'slash chord'

# and the TaxonomySelection inversion key for each label:
label_inversions = {'root': 'root',
                    '1st inversion': 'first',
                    '2nd inversion': 'second',
                    '3rd inversion': 'third',
                    'slash chord': 'slash'}


def chroma_vector(positions):
    """12-element boolean mask with True at each of the given chromatic positions"""
    vec = np.zeros(12, dtype=bool)
    vec[np.array([p % 12 for p in positions], dtype=int)] = True
    return vec


@dataclass(frozen=True)
class ChordTemplate:
    """a named chord shape, defined as the set of semitone offsets of its tones above the root.
    offsets are wrapped mod 12 and deduplicated on init, and must always include the root (0).

    the selection fields (triad, extension_category, specific_extension, extension_variant)
    record which taxonomy entry builds the same chord."""
    key: str
    offsets: tuple
    suffix: str
    name: str
    family: str
    available_for: tuple = ()
    triad: Optional[str] = None
    extension_category: Optional[str] = None
    specific_extension: Optional[str] = None
    extension_variant: Optional[str] = None

    def __post_init__(self):
        offsets = tuple(sorted(set(int(o) % 12 for o in self.offsets)))
        if 0 not in offsets:
            raise MusicError(f'ChordTemplate {self.key} does not contain its root: {self.offsets}')
        object.__setattr__(self, 'offsets', offsets)
        object.__setattr__(self, 'available_for', tuple(self.available_for))

    @cached_property
    def vector(self):
        """the template as a 12-element chroma mask relative to a root at position 0"""
        return chroma_vector(self.offsets)

    def matches(self, chroma):
        """accepts a root-relative chroma mask (or an iterable of offsets) and returns True
        if every offset of this template is present in it. extra offsets are tolerated."""
        if not isinstance(chroma, np.ndarray):
            chroma = chroma_vector(chroma)
        return bool(np.all(chroma[self.vector]))

    def __contains__(self, offset):
        return (offset % 12) in self.offsets

    def __len__(self):
        return len(self.offsets)

    def __str__(self):
        lb, rb = _settings.BRACKETS['ChordTemplate']
        marker = _settings.MARKERS['ChordTemplate']
        return f'{marker}{self.name} {lb}{"-".join(str(o) for o in self.offsets)}{rb}'

    def __repr__(self):
        return str(self)


@dataclass(frozen=True)
class ChordDescriptor:
    """the structured result of recognising a set of notes, or of building a chord from
    a TaxonomySelection. created fresh by each call and never modified afterward.

    chord_type is a template key (like 'maj7'), or one of the special tags
    'single', 'interval', 'unknown' or 'search'."""
    symbol: str
    description: str
    notes: tuple
    inversion: str = ROOT_POSITION
    chord_type: str = 'unknown'
    base_chord: str = ''
    root: Optional[str] = None
    interval_type: Optional[str] = None
    bass: Optional[str] = None
    template: Optional[ChordTemplate] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'notes', tuple(self.notes))

    @property
    def is_interval(self):
        return self.chord_type == 'interval'

    @property
    def is_chord(self):
        return self.template is not None

    @property
    def chroma(self):
        """a 12-element boolean mask of the pitch classes in this chord"""
        return chroma_vector([PitchClass(n).position for n in self.notes])

    def to_dict(self):
        """the interchange mapping consumed by a host application for display,
        and for building a search query for the external sample service"""
        dct = {'symbol': self.symbol,
               'description': self.description,
               'notes': list(self.notes),
               'inversion': self.inversion,
               'chordType': self.chord_type,
               'baseChord': self.base_chord}
        if self.root is not None:
            dct['root'] = self.root
        if self.interval_type is not None:
            dct['intervalType'] = self.interval_type
        return dct

    def to_selection(self):
        """returns the TaxonomySelection that builds the same chord or interval,
        or None for descriptors that have no taxonomy equivalent (unknown chords and searches)"""
        if self.chord_type == 'single':
            return TaxonomySelection(root=self.root)
        elif self.is_interval:
            return TaxonomySelection(root=self.root, type='interval', interval_type=self.interval_type)
        elif self.template is not None:
            t = self.template
            inversion = label_inversions.get(self.inversion, ROOT_POSITION)
            return TaxonomySelection(root=self.root, type='chord', triad=t.triad,
                                     extension_category=t.extension_category or 'none',
                                     specific_extension=t.specific_extension,
                                     extension_variant=t.extension_variant,
                                     inversion=inversion,
                                     bass=self.bass if inversion == 'slash' else None)
        else:
            return None

    def __str__(self):
        marker = _settings.MARKERS['ChordDescriptor']
        return f'{marker}{self.symbol} ({" ".join(self.notes)})'

    def __repr__(self):
        return str(self)
