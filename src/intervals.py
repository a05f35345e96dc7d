from dataclasses import dataclass

from .util import MusicError
from . import _settings


@dataclass(frozen=True)
class IntervalDescriptor:
    """a named distance between two notes, defined in semitones.
    'key' is the taxonomy's type tag (e.g. 'major3rd'),
    'symbol' the short form used in chord symbols and search queries (e.g. 'M3'),
    and 'name' the human-readable form (e.g. 'Major 3rd')."""
    key: str
    symbol: str
    name: str
    semitones: int
    advanced_only: bool = False

    @property
    def mod(self):
        """semitone class of this interval, between 0 and 11"""
        return self.semitones % 12

    @property
    def compound(self):
        return self.semitones >= 12

    def __str__(self):
        lb, rb = _settings.BRACKETS['IntervalDescriptor']
        return f'{lb}{self.name}{rb}'

    def __repr__(self):
        return str(self)


def intervals_by_class(intervals):
    """accepts an iterable of IntervalDescriptors and returns a dict keying each semitone
    class 0-11 to exactly one descriptor. simple intervals take precedence over compound
    ones, so the octave never shadows the unison."""
    by_class = {}
    for iv in sorted(intervals, key=lambda i: i.semitones):
        if iv.mod not in by_class:
            by_class[iv.mod] = iv
    missing = [s for s in range(12) if s not in by_class]
    if len(missing) > 0:
        raise MusicError(f'Interval table has no entry for semitone classes: {missing}')
    return by_class
