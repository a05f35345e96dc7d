### the selection-to-symbol builder: turns a TaxonomySelection into a canonical chord symbol
### (which doubles as the search key for the external sample service), a filename and a
### categorised folder path. also the inverse: parsing a chord symbol back into a selection.
### every function here is a pure function of its arguments and the (immutable) Taxonomy.

import os
import re

from .taxonomy import TAXONOMY
from .selection import TaxonomySelection
from .chords import ChordDescriptor, label_inversions, ROOT_POSITION
from .notes import PitchClass
from .util import log, longest_prefix, reverse_dict, rotate_list
from . import parsing, _settings


# folder segment for each extension category. no other category has a folder:
category_folders = {'none': 'triads',
                    '7th': 'seventh_chords',
                    'extended': 'extended_chords',
                    'added': 'added_note_chords'}

# descriptor inversion labels for each selection inversion key:
inversion_labels = reverse_dict(label_inversions)

_forbidden_chars = re.compile('[' + re.escape(_settings.FORBIDDEN_FILENAME_CHARS) + ']')
_whitespace = re.compile(r'\s+')


def build_symbol(selection: TaxonomySelection, taxonomy=None):
    """renders a (possibly partial) selection as a canonical chord symbol, e.g. 'Cm7/3'.

    unknown or missing taxonomy keys contribute nothing to the symbol, so this always
    returns a string; a selection with nothing but a root renders as the root alone."""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    root = selection.root or ''

    if selection.is_interval:
        interval = taxonomy.intervals.get(selection.interval_type)
        if interval is None:
            log(f'No interval type for {selection}, rendering root alone')
            return root
        return f'{root} {interval.symbol}'

    symbol = root
    option = taxonomy.extension_option(selection.extension_category, selection.specific_extension)

    # major triads have an empty suffix, so 'C' is C major:
    if selection.triad is not None and selection.triad != 'major':
        triad = taxonomy.triads.get(selection.triad)
        if triad is None:
            log(f'Unknown triad quality: {selection.triad}')
        else:
            symbol += triad.symbol

    if selection.extension_category == 'extended' and selection.specific_extension:
        # extended chords are spelled as a whole, so the variant symbol replaces the triad:
        variant = taxonomy.resolve_variant(selection.specific_extension, selection.extension_variant)
        if variant is not None:
            log(f'Resolved {selection.specific_extension} variant to: {variant.key}')
            symbol = root + variant.symbol
    elif selection.extension_category and selection.specific_extension:
        if option is not None:
            symbol += option.symbol
        else:
            log(f'Unknown extension: {selection.extension_category}/{selection.specific_extension}')

    for alt in selection.alterations:
        alteration = taxonomy.alteration(alt)
        if alteration is not None:
            symbol += alteration.symbol
        else:
            log(f'Unknown alteration: {alt}')

    symbol += inversion_symbol(selection, taxonomy)
    return symbol


def inversion_symbol(selection, taxonomy=None):
    """the slash suffix for a selection's inversion, e.g. '/3', or '' in root position"""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    if selection.inversion is None or selection.inversion == 'root':
        return ''
    if selection.inversion == 'slash':
        return '/' + (selection.bass or _settings.CHARACTERS['slash_placeholder'])
    inversion = taxonomy.inversions.get(selection.inversion)
    if inversion is None:
        log(f'Unknown inversion: {selection.inversion}')
        return ''
    return inversion.symbol


def sanitise_filename(name):
    """replaces characters that filesystems reject with underscores, collapses whitespace
    runs to a single underscore, then trims. sharps and flats are kept as they are."""
    name = _forbidden_chars.sub('_', name)
    return _whitespace.sub('_', name).strip()


def generate_filename(selection, extension=None, taxonomy=None):
    """the standardised sample filename for a selection, e.g. 'C#m7b5.wav'.
    the extension is appended unchanged (it should include its leading dot)."""
    if extension is None:
        extension = _settings.DEFAULT_FILE_EXTENSION
    return sanitise_filename(build_symbol(selection, taxonomy)) + extension


def parse_filename(filename, taxonomy=None):
    """reads a filename made by generate_filename (like 'C#m7b5.wav', 'F#_P5.wav' or 'C_E.wav')
    back into a TaxonomySelection. the extension, if any, is ignored.
    an underscore may stand for the space in an interval symbol or for the slash in a slash chord,
    so both readings are tried in that order. raises ValueError if neither parses."""
    stem = os.path.splitext(os.path.basename(filename))[0]
    if '_' not in stem:
        return parse_symbol(stem, taxonomy)
    for separator in (' ', '/'):
        try:
            return parse_symbol(stem.replace('_', separator), taxonomy)
        except ValueError:
            log(f'{stem} does not read as a symbol with {separator!r} for underscores')
    raise ValueError(f'Could not parse chord filename: {filename}')


def generate_folder_path(selection):
    """the categorised folder for a selection, e.g. 'seventh_chords/minor/altered'.
    triad defaults to major and extension category to none. extension categories
    without a folder (which includes '6th') are a caller error and raise ValueError."""
    if selection.is_interval:
        base_path = 'intervals'
    else:
        triad = selection.triad or 'major'
        extension = selection.extension_category or 'none'
        if extension not in category_folders:
            raise ValueError(f'No folder defined for extension category: {extension} '
                             f'(expected one of: {list(category_folders)})')
        base_path = f'{category_folders[extension]}/{triad}'

    if selection.is_altered:
        base_path += '/altered'
    return base_path


#### chord tones:

def _degree_number(degree_str):
    return parsing.parse_degree(degree_str)[0]


def implied_triad(selection, taxonomy=None):
    """the triad quality a chord selection is built on. a selection that names a 6th, 7th
    or added extension without a triad (like 'Cm7b5') is built on the first triad quality
    that extension is available for. otherwise the triad defaults to major."""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    if selection.triad:
        return selection.triad
    option = taxonomy.extension_option(selection.extension_category, selection.specific_extension)
    if option is not None and selection.extension_category != 'extended' and option.available_for:
        return option.available_for[0]
    return 'major'

def selection_intervals(selection, taxonomy=None):
    """the chord degrees (as strings like '1', 'b3', '#5', '9') of a chord selection,
    in ascending order of their distance above the root.
    alterations replace the degree they alter (e.g. '#5' replaces '5'), or are added if it is absent."""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    triad = taxonomy.triads.get(implied_triad(selection, taxonomy))
    if triad is None:
        triad = taxonomy.triads['major']
    degrees = list(triad.intervals)

    def set_degree(new_degree):
        number = _degree_number(new_degree)
        for i, existing in enumerate(degrees):
            if _degree_number(existing) == number:
                degrees[i] = new_degree
                return
        degrees.append(new_degree)

    option = taxonomy.extension_option(selection.extension_category, selection.specific_extension)
    if option is not None:
        if selection.extension_category == 'extended':
            variant = taxonomy.resolve_variant(selection.specific_extension, selection.extension_variant)
            base_degrees = taxonomy.base_chord_degrees.get(variant.base_chord, ()) if variant is not None else ()
            for degree in base_degrees:
                number = _degree_number(degree)
                if number == 3 and not any(_degree_number(d) == 3 for d in degrees):
                    # suspended chords keep their suspension instead of a third
                    continue
                if number in (3, 7):
                    set_degree(degree)
            for degree in option.intervals:
                if _degree_number(degree) != 7:
                    set_degree(degree)
        else:
            for degree in option.intervals:
                set_degree(degree)

    for alt in selection.alterations:
        alteration = taxonomy.alteration(alt)
        if alteration is not None:
            set_degree(alteration.interval)

    return sorted(degrees, key=lambda d: parsing.parse_degree(d)[1])


def selection_notes(selection, taxonomy=None):
    """the pitch classes of a selection as a voicing from the bass upward,
    e.g. a C major 1st inversion is ['E', 'G', 'C'].
    interval selections give their two notes; a selection without a root gives []."""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    if not selection.root:
        return []
    root = PitchClass(selection.root)

    if selection.is_interval:
        interval = taxonomy.intervals.get(selection.interval_type)
        if interval is None:
            return [root.name]
        return [root.name, (root + interval.semitones).name]

    degrees = selection_intervals(selection, taxonomy)
    voicing = [(root + parsing.degree_value(d)).name for d in degrees]
    # drop doubled pitch classes (e.g. a 13th against an added 6th), keeping the lowest:
    voicing = list(dict.fromkeys(voicing))

    inversion = taxonomy.inversions.get(selection.inversion) if selection.inversion else None
    if selection.inversion == 'slash' and selection.bass:
        bass = PitchClass(selection.bass).name
        return [bass] + [n for n in voicing if n != bass]
    elif inversion is not None and inversion.bass_degree is not None:
        for degree in degrees:
            if _degree_number(degree) == inversion.bass_degree:
                bass = (root + parsing.degree_value(degree)).name
                return rotate_list(voicing, voicing.index(bass))
        log(f'{selection} has no chord tone on degree {inversion.bass_degree}, leaving it in root position')
    return voicing


#### descriptions:

def describe(selection, taxonomy=None):
    """a human-readable description of a selection, e.g. 'C Minor 7th (1st inversion (3rd in bass))'"""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    root = selection.root or ''
    if selection.is_interval:
        interval = taxonomy.intervals.get(selection.interval_type)
        return f'{root} {interval.name}' if interval is not None else root

    parts = []
    option = taxonomy.extension_option(selection.extension_category, selection.specific_extension)
    triad = taxonomy.triads.get(selection.triad) if selection.triad else None
    if option is not None and selection.extension_category == 'extended':
        variant = taxonomy.resolve_variant(selection.specific_extension, selection.extension_variant)
        variant_name = f'{variant.key} ' if variant is not None else ''
        parts.append(f'{variant_name}{option.name}')
    elif option is not None:
        if triad is not None and triad.key != 'major':
            parts.append(triad.name)
        parts.append(option.name)
    elif triad is not None:
        parts.append(triad.name)

    alteration_names = [taxonomy.alteration(a).name for a in selection.alterations if taxonomy.alteration(a) is not None]
    if len(alteration_names) > 0:
        parts.append(f'({", ".join(alteration_names)})')

    description = ' '.join([root] + parts).strip()
    inversion = taxonomy.inversions.get(selection.inversion) if selection.inversion else None
    if inversion is not None and selection.inversion != 'root':
        description += f' ({inversion.name})'
    return description


def _template_for(selection, taxonomy):
    """the recognition template equivalent to a chord selection, if there is one"""
    variant = None
    if selection.extension_category == 'extended':
        resolved = taxonomy.resolve_variant(selection.specific_extension, selection.extension_variant)
        variant = resolved.key if resolved is not None else None
    category = selection.extension_category or 'none'
    for template in taxonomy.templates:
        if (template.triad == implied_triad(selection, taxonomy)
            and (template.extension_category or 'none') == category
            and template.specific_extension == selection.specific_extension
            and template.extension_variant == variant):
            return template
    return None


def build_descriptor(selection, taxonomy=None):
    """builds a ChordDescriptor for a selection, in the same shape the recognizer produces,
    so that a host can treat built and recognised chords interchangeably"""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    symbol = build_symbol(selection, taxonomy)
    base_selection = selection.update('inversion', None).update('bass', None)
    base_chord = build_symbol(base_selection, taxonomy)
    voicing = selection_notes(selection, taxonomy)
    notes = tuple(sorted(voicing, key=lambda n: PitchClass(n).position))
    root = parsing.canonical_name(selection.root) if selection.root else None
    bass = voicing[0] if len(voicing) > 0 else None

    if selection.is_interval:
        return ChordDescriptor(symbol=symbol, description=describe(selection, taxonomy), notes=notes,
                               chord_type='interval', base_chord=base_chord, root=root,
                               interval_type=selection.interval_type, bass=bass)

    template = _template_for(selection, taxonomy)
    if template is not None:
        chord_type = template.key
    else:
        chord_type = selection.specific_extension or selection.triad or 'major'
    inversion = inversion_labels.get(selection.inversion or 'root', ROOT_POSITION)
    return ChordDescriptor(symbol=symbol, description=describe(selection, taxonomy), notes=notes,
                           inversion=inversion, chord_type=chord_type, base_chord=base_chord,
                           root=root, bass=bass, template=template)


#### symbol parsing:

def symbol_vocabulary(taxonomy=None):
    """maps every chord-quality spelling the builder can produce (everything in a symbol
    between the root and the alterations) to the selection fields that produce it.
    earlier entries win where two selections share a spelling."""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    vocab = {}
    for triad in taxonomy.triads.values():
        triad_suffix = '' if triad.key == 'major' else triad.symbol
        vocab.setdefault(triad_suffix, dict(triad=triad.key, extension_category='none'))
        for category_key in taxonomy.available_extensions(triad.key):
            if category_key in ('none', 'extended'):
                continue
            for option in taxonomy.available_options(category_key, triad.key).values():
                vocab.setdefault(triad_suffix + option.symbol, dict(triad=triad.key, extension_category=category_key,
                                                                    specific_extension=option.key))
    # extensions given without a triad, like 'm7b5', where no triad spelling claims them first:
    for category_key, category in taxonomy.extension_categories.items():
        if category_key in ('none', 'extended'):
            continue
        for option in category.options.values():
            vocab.setdefault(option.symbol, dict(triad=None, extension_category=category_key,
                                                 specific_extension=option.key))
    variant_triads = {'min7': 'minor'}
    for option in taxonomy.extension_categories['extended'].options.values():
        for variant in option.variants.values():
            vocab.setdefault(variant.symbol, dict(triad=variant_triads.get(variant.base_chord, 'major'),
                                                  extension_category='extended',
                                                  specific_extension=option.key,
                                                  extension_variant=variant.key))
    return vocab


def _parse_alterations(string, taxonomy):
    """splits a string of concatenated alteration symbols (like 'b5#9') into alteration keys,
    or returns None if it is not made up entirely of alteration symbols"""
    alterations = []
    while len(string) > 0:
        symbol = longest_prefix(string, taxonomy.alteration_symbols)
        if symbol is None:
            return None
        alterations.append(taxonomy.alteration_symbols[symbol].key)
        string = string[len(symbol):]
    return alterations


def parse_symbol(symbol, taxonomy=None):
    """parses a chord symbol produced by build_symbol (like 'Cm7b5/3', 'Ebmaj9' or 'F# P5')
    back into a TaxonomySelection. raises ValueError if the symbol cannot be read."""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    symbol = symbol.strip()

    # intervals are spelled with a space between the root and the interval symbol:
    if ' ' in symbol:
        split = parsing.note_split(symbol, graceful_fail=True)
        intervals = {iv.symbol: iv for iv in taxonomy.intervals.values()}
        if split is False or split[1] not in intervals:
            raise ValueError(f'Could not parse interval symbol: {symbol}')
        root, interval_symbol = split
        return TaxonomySelection(root=root, type='interval', interval_type=intervals[interval_symbol].key)

    inversion, bass = None, None
    if '/' in symbol:
        symbol, slash = symbol.rsplit('/', 1)
        inversions_by_symbol = {inv.symbol: inv.key for inv in taxonomy.inversions.values() if inv.symbol}
        if f'/{slash}' in inversions_by_symbol:
            inversion = inversions_by_symbol[f'/{slash}']
        elif slash in parsing.note_positions:
            inversion, bass = 'slash', slash
        else:
            raise ValueError(f'Could not parse slash in chord symbol: {symbol}/{slash}')

    vocab = symbol_vocabulary(taxonomy)
    # try the longest root name first, then shorter ones, since 'Cb5' could be
    # a C-flat power chord or a C with a flattened 5th:
    for root_len in (3, 2, 1):
        root, remainder = symbol[:root_len], symbol[root_len:]
        if root not in parsing.note_positions:
            continue
        quality = longest_prefix(remainder, vocab)
        fields = dict(vocab[quality]) if quality is not None else dict(vocab[''])
        rest = remainder[len(quality):] if quality is not None else remainder
        alterations = _parse_alterations(rest, taxonomy)
        if alterations is None:
            log(f'Could not read {remainder} after root {root}')
            continue
        return TaxonomySelection(root=root, type='chord', alterations=tuple(alterations),
                                 inversion=inversion, bass=bass, **fields)
    raise ValueError(f'Could not parse chord symbol: {symbol}')
