### the Taxonomy is the static reference model shared by the recognizer, the symbol builder
### and the mode filter: every root, interval, triad quality, extension, alteration, inversion
### and chord template, with the rules for which of them can be combined.
### it is built once, at import, from the tables in config/, and never modified afterward.
### components take it as an argument (defaulting to the module-level TAXONOMY) rather than
### reading the config tables themselves.

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from .intervals import IntervalDescriptor, intervals_by_class
from .chords import ChordTemplate
from .util import MusicError, log
from .config import def_taxonomy, def_templates


@dataclass(frozen=True)
class Option:
    """a single selectable entry in some part of the taxonomy"""
    key: str
    symbol: str = ''
    name: str = ''
    available_for: Optional[tuple] = None
    is_default: bool = False
    advanced_only: bool = False

    def available(self, parent):
        """True if this option may be attached to the given parent key.
        options with no availability list are available for everything."""
        return (self.available_for is None) or (parent in self.available_for)


@dataclass(frozen=True)
class TriadQuality(Option):
    intervals: tuple = ()
    available_extensions: tuple = ()


@dataclass(frozen=True)
class ExtensionVariant(Option):
    base_chord: str = ''


@dataclass(frozen=True)
class ExtensionOption(Option):
    intervals: tuple = ()
    variants: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class ExtensionCategory(Option):
    description: str = ''
    options: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class Alteration(Option):
    interval: str = ''
    category: str = ''


@dataclass(frozen=True)
class AlterationCategory(Option):
    options: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class Inversion(Option):
    bass_degree: Optional[int] = None


@dataclass(frozen=True)
class Mode:
    key: str
    name: str
    description: str
    allow_lists: MappingProxyType

    def allowed(self, category):
        """the allow-list for a category in this mode: a tuple of keys, or the string 'all'"""
        return self.allow_lists.get(category, 'all')


def _frozen(dct):
    return MappingProxyType(dict(dct))

def _flags(spec):
    """read the common option flags from a raw config entry"""
    available_for = spec.get('available_for')
    return dict(symbol=spec.get('symbol', ''),
                name=spec.get('name', ''),
                available_for=tuple(available_for) if available_for is not None else None,
                is_default=spec.get('is_default', False),
                advanced_only=spec.get('advanced_only', False))


class Taxonomy:
    """the immutable chord-finder reference model. see Taxonomy.from_config for
    the usual way to build one."""
    def __init__(self, roots, intervals, triads, extension_categories, alteration_categories,
                 inversions, modes, templates, base_chord_degrees):
        self.roots = tuple(roots)
        self.intervals = _frozen(intervals)
        self.triads = _frozen(triads)
        self.extension_categories = _frozen(extension_categories)
        self.alteration_categories = _frozen(alteration_categories)
        self.inversions = _frozen(inversions)
        self.modes = _frozen(modes)
        # recognition priority order:
        self.templates = tuple(templates)
        self.base_chord_degrees = _frozen({k: tuple(v) for k,v in base_chord_degrees.items()})

        self.template_by_key = _frozen({t.key: t for t in self.templates})
        self._intervals_by_class = _frozen(intervals_by_class(self.intervals.values()))

        # flat lookups of alterations by key and by symbol:
        self.alterations = _frozen({alt.key: alt for cat in self.alteration_categories.values()
                                                  for alt in cat.options.values()})
        self.alteration_symbols = _frozen({alt.symbol: alt for alt in self.alterations.values()})

        self._validate()
        log(f'Initialised taxonomy with {len(self.triads)} triads, {len(self.extension_categories)} extension categories, '
            f'{len(self.templates)} chord templates')

    @classmethod
    def from_config(cls, taxonomy_defs=def_taxonomy, template_defs=def_templates):
        """builds a Taxonomy from raw config tables (by default, the ones in chordfinder.config)"""
        intervals = {key: IntervalDescriptor(key=key, symbol=spec['symbol'], name=spec['name'],
                                             semitones=spec['semitones'],
                                             advanced_only=spec.get('advanced_only', False))
                     for key, spec in taxonomy_defs.intervals.items()}

        triads = {key: TriadQuality(key=key, intervals=tuple(spec['intervals']),
                                    available_extensions=tuple(spec['available_extensions']),
                                    **_flags(spec))
                  for key, spec in taxonomy_defs.triad_qualities.items()}

        categories = {}
        for cat_key, cat_spec in taxonomy_defs.extension_categories.items():
            options = {}
            for opt_key, opt_spec in cat_spec.get('options', {}).items():
                variants = {var_key: ExtensionVariant(key=var_key, base_chord=var_spec.get('base_chord', ''),
                                                      **_flags(var_spec))
                            for var_key, var_spec in opt_spec.get('variants', {}).items()}
                options[opt_key] = ExtensionOption(key=opt_key, intervals=tuple(opt_spec.get('intervals', ())),
                                                   variants=_frozen(variants), **_flags(opt_spec))
            categories[cat_key] = ExtensionCategory(key=cat_key, description=cat_spec.get('description', ''),
                                                    options=_frozen(options), **_flags(cat_spec))

        alteration_categories = {}
        for cat_key, cat_spec in taxonomy_defs.alteration_categories.items():
            options = {alt_key: Alteration(key=alt_key, interval=alt_spec['interval'], category=cat_key,
                                           **_flags(alt_spec))
                       for alt_key, alt_spec in cat_spec['options'].items()}
            alteration_categories[cat_key] = AlterationCategory(key=cat_key, options=_frozen(options),
                                                                **_flags(cat_spec))

        inversions = {key: Inversion(key=key, bass_degree=spec.get('bass_degree'), **_flags(spec))
                      for key, spec in taxonomy_defs.inversions.items()}

        modes = {}
        for key, spec in taxonomy_defs.modes.items():
            allow_lists = {cat: (allowed if allowed == 'all' else tuple(allowed))
                           for cat, allowed in spec.items() if cat not in ('name', 'description')}
            modes[key] = Mode(key=key, name=spec['name'], description=spec['description'],
                              allow_lists=_frozen(allow_lists))

        templates = [ChordTemplate(key=spec['key'], offsets=spec['offsets'], suffix=spec['suffix'],
                                   name=spec['name'], family=spec['family'],
                                   available_for=spec.get('available_for', ()),
                                   triad=spec.get('triad'),
                                   extension_category=spec.get('extension_category'),
                                   specific_extension=spec.get('specific_extension'),
                                   extension_variant=spec.get('extension_variant'))
                     for spec in template_defs.templates]

        return cls(taxonomy_defs.roots, intervals, triads, categories, alteration_categories,
                   inversions, modes, templates, taxonomy_defs.base_chord_degrees)

    def _validate(self):
        """checks that each sibling group has at most one default option,
        and that every key the tables refer to actually exists"""
        groups = {'triads': self.triads, 'extension categories': self.extension_categories,
                  'inversions': self.inversions}
        for cat in self.extension_categories.values():
            groups[f'{cat.key} options'] = cat.options
            for opt in cat.options.values():
                if len(opt.variants) > 0:
                    groups[f'{opt.key} variants'] = opt.variants
        for cat in self.alteration_categories.values():
            groups[f'{cat.key} alterations'] = cat.options

        for group_name, group in groups.items():
            defaults = [key for key, opt in group.items() if opt.is_default]
            if len(defaults) > 1:
                raise MusicError(f'Taxonomy group "{group_name}" has more than one default option: {defaults}')

        for triad in self.triads.values():
            for ext in triad.available_extensions:
                if ext not in self.extension_categories:
                    raise MusicError(f'Triad {triad.key} refers to unknown extension category: {ext}')
        for template in self.templates:
            if template.triad is not None and template.triad not in self.triads:
                raise MusicError(f'Template {template.key} refers to unknown triad quality: {template.triad}')
        if len(self.template_by_key) != len(self.templates):
            raise MusicError('Chord template keys must be unique')

    #### lookups:

    def interval_by_semitones(self, semitones):
        """the unique interval descriptor for the semitone class of 'semitones' (mod 12)"""
        return self._intervals_by_class[semitones % 12]

    def extension_option(self, extension_category, specific_extension):
        """the ExtensionOption for a category/extension pair, or None if either is unknown"""
        category = self.extension_categories.get(extension_category)
        if category is None:
            return None
        return category.options.get(specific_extension)

    def resolve_variant(self, specific_extension, variant=None, extension_category='extended'):
        """the ExtensionVariant to use for an extended chord: the named variant if given
        (and known), else the sibling flagged as default, else the first one listed.
        returns None if the extension is unknown or has no variants."""
        option = self.extension_option(extension_category, specific_extension)
        if option is None or len(option.variants) == 0:
            return None
        if variant is not None and variant in option.variants:
            return option.variants[variant]
        return option.variants[default_option(option.variants)]

    def alteration(self, alteration):
        """looks up an alteration by key (like 'sharp5') or by symbol (like '#5'),
        returning None if it is neither"""
        if alteration in self.alterations:
            return self.alterations[alteration]
        return self.alteration_symbols.get(alteration)

    #### applicability queries:

    def available_extensions(self, triad):
        """the extension category keys that can follow a triad quality, in order"""
        quality = self.triads.get(triad)
        if quality is None:
            return []
        return [ext for ext in quality.available_extensions
                    if self.extension_categories[ext].available(triad)]

    def available_options(self, extension_category, triad):
        """the options of an extension category that can be attached to a triad quality"""
        category = self.extension_categories.get(extension_category)
        if category is None or not category.available(triad):
            return {}
        return {key: opt for key, opt in category.options.items() if opt.available(triad)}

    def available_sixths(self, triad):
        return self.available_options('6th', triad)

    def available_sevenths(self, triad):
        return self.available_options('7th', triad)

    def available_extended(self, triad):
        return self.available_options('extended', triad)

    def available_added(self, triad):
        return self.available_options('added', triad)

    def available_alterations(self, extension_category=None):
        """the alteration categories (with their options) legal on top of an extension category"""
        return {key: cat for key, cat in self.alteration_categories.items()
                    if cat.available(extension_category)}

    def available_inversions(self, extension_category=None):
        """the inversions legal for an extension category. a 3rd inversion needs a 7th in the chord."""
        return {key: inv for key, inv in self.inversions.items()
                    if inv.available(extension_category)}


def default_option(options):
    """given a mapping of sibling options, returns the key of the one flagged as default,
    or else the first key, or None for an empty mapping"""
    for key, opt in options.items():
        if opt.is_default:
            return key
    for key in options:
        return key
    return None


# the process-wide taxonomy, constructed once at import:
TAXONOMY = Taxonomy.from_config()
