### the pitch-set recognizer: identifies the chord or interval formed by a set of notes,
### along with its inversion, by searching over candidate roots and chord templates.
### also derives the search term that a host sends to the sample service, and parses
### free-text search queries back into (rough) chord descriptors.

import re

import numpy as np

from .notes import OctaveNote, cast_note
from .chords import ChordDescriptor, chroma_vector, inversion_labels, ROOT_POSITION, SLASH_CHORD
from .taxonomy import TAXONOMY
from .util import log


def identify_interval(a, b, taxonomy=None):
    """the IntervalDescriptor for the ascending distance from note a up to note b (mod 12)"""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    a, b = cast_note(a), cast_note(b)
    return taxonomy.interval_by_semitones((b.position - a.position + 12) % 12)


def match_template(offsets, taxonomy=None, most_specific=False):
    """accepts a set of semitone offsets above an assumed root (or a root-relative chroma mask)
    and returns the ChordTemplate that matches it, or None if none does.

    templates are tried in priority order and the first match wins, unless most_specific,
    in which case the matching template with the most offsets wins (ties go by priority)."""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    chroma = offsets if isinstance(offsets, np.ndarray) else chroma_vector(offsets)
    best = None
    for template in taxonomy.templates:
        if template.matches(chroma):
            if not most_specific:
                return template
            if best is None or len(template) > len(best):
                best = template
    return best


def detect_inversion(root, bass, template):
    """the inversion label for a chord with the given root and bass note:
    root position if they are the same pitch class, an inversion if the bass is the chord's
    3rd, 5th or 7th (and that tone is part of the template), or a slash chord otherwise."""
    offset = (cast_note(bass).position - cast_note(root).position) % 12
    if offset == 0:
        return ROOT_POSITION
    if offset in inversion_labels and (template is None or offset in template):
        return inversion_labels[offset]
    return SLASH_CHORD


def _voicing_heights(notes):
    """assigns a pitch height to each input note, and returns (note, height) pairs
    deduplicated by pitch class (keeping the lowest height for each).

    notes with octave information keep their MIDI value. bare pitch classes are stacked:
    each sits at the nearest position strictly above the note before it, so that
    ['E', 'G', 'C'] is voiced E-G-C from the bass upward."""
    heights = {}
    prev = None
    for note in notes:
        if isinstance(note, OctaveNote):
            height = note.value
        elif prev is None:
            height = note.position
        else:
            height = prev + ((note.position - prev) % 12 or 12)
        if note.position not in heights or height < heights[note.position][1]:
            heights[note.position] = (note, height)
        prev = height
    # dict preserves first-seen order, which is the input order:
    return list(heights.values())


def recognise(notes, root_agnostic=False, inversion_agnostic=False, most_specific=False, taxonomy=None):
    """identifies the chord or interval formed by some notes, and returns a ChordDescriptor,
    or None if no notes were given.

    args:
        notes: an iterable of note names ('C', 'Eb', 'F#3'), MIDI numbers, or note objects.
            the lowest note is taken as the bass; see _voicing_heights for how octave-free
            names are voiced.
        root_agnostic: report the chord type (e.g. 'maj7') instead of a rooted symbol.
        inversion_agnostic: leave the inversion out of the symbol and description
            (the descriptor's 'inversion' attribute is still set).
        most_specific: prefer the largest matching template at the first matching root,
            instead of the first template in priority order.
    """
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    cast_notes = [cast_note(n) for n in notes]
    if len(cast_notes) == 0:
        return None

    voiced = _voicing_heights(cast_notes)
    input_names = [note.name for note, h in voiced]
    sorted_names = tuple(sorted(input_names, key=lambda n: cast_note(n).position))
    bass = min(voiced, key=lambda nh: nh[1])[0]

    if len(voiced) == 1:
        name = input_names[0]
        return ChordDescriptor(symbol=name, description=f'{name} (single note)', notes=sorted_names,
                               chord_type='single', base_chord=name, root=name, bass=name)

    if len(voiced) == 2:
        lower, upper = sorted_names
        interval = identify_interval(lower, upper, taxonomy)
        base_chord = f'{lower} {interval.symbol}'
        symbol = interval.symbol if root_agnostic else base_chord
        log(f'Two notes, identified interval: {interval}')
        return ChordDescriptor(symbol=symbol, description=f'{lower} {upper} ({interval.name.lower()})',
                               notes=sorted_names, chord_type='interval', base_chord=base_chord,
                               root=lower, interval_type=interval.key, bass=bass.name)

    # candidate roots, in ascending chromatic order upward from the bass:
    candidate_roots = sorted([note for note, h in voiced], key=lambda n: (n.position - bass.position) % 12)
    chroma = chroma_vector([note.position for note, h in voiced])
    for root in candidate_roots:
        # shift the chroma so that this root sits at offset 0:
        relative_chroma = np.roll(chroma, -root.position)
        template = match_template(relative_chroma, taxonomy, most_specific=most_specific)
        log(f'Trying root {root.name}: {"matched " + template.key if template is not None else "no match"}')
        if template is not None:
            return _chord_descriptor(root, bass, template, sorted_names,
                                     root_agnostic, inversion_agnostic)

    # unmatched notes are reported as given, repeats included:
    given_names = [note.name for note in cast_notes]
    log(f'No template matches notes: {given_names}')
    return ChordDescriptor(symbol=''.join(given_names), description=' '.join(given_names),
                           notes=sorted_names, chord_type='unknown', base_chord=''.join(given_names),
                           bass=bass.name)


def _chord_descriptor(root, bass, template, notes, root_agnostic, inversion_agnostic):
    inversion = detect_inversion(root, bass, template)
    base_chord = root.name + template.suffix
    symbol = template.key if root_agnostic else base_chord
    description = f'{root.name} {template.name}'
    if inversion != ROOT_POSITION and not inversion_agnostic:
        symbol += f' ({inversion})'
        description += f' ({inversion})'
    return ChordDescriptor(symbol=symbol, description=description, notes=notes,
                           inversion=inversion, chord_type=template.key, base_chord=base_chord,
                           root=root.name, bass=bass.name, template=template)


#### sample search:

def search_term(descriptor, root_agnostic=False, inversion_agnostic=False, taxonomy=None):
    """the query string for the external sample service that corresponds to a descriptor"""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    if root_agnostic:
        if descriptor.is_interval and descriptor.interval_type in taxonomy.intervals:
            return taxonomy.intervals[descriptor.interval_type].symbol
        return descriptor.chord_type
    elif inversion_agnostic:
        return descriptor.base_chord
    else:
        return descriptor.symbol


_query_root = re.compile(r'^([A-G][#b]?)')

def parse_search_query(query):
    """turns a free-text search query into a rough descriptor, so that the host can show
    something for what was searched. this is deliberately loose: a leading root note is
    split off and the rest is taken as the chord type, unparsed.
    returns None for a blank query."""
    query = query.strip()
    if len(query) == 0:
        return None
    match = _query_root.match(query)
    if match is None:
        return ChordDescriptor(symbol=query, description=query, notes=(),
                               chord_type='search', base_chord=query)
    root = match.group(1)
    quality = query[len(root):]
    return ChordDescriptor(symbol=query, description=f'Search: {query}', notes=(),
                           chord_type=quality or 'major', base_chord=query, root=root)
