### the mode filter restricts taxonomy option lists to the entries legal under a complexity mode:
### 'advanced' shows everything, while 'simple' shows only the common chords.

from .taxonomy import TAXONOMY
from .util import log
from . import _settings


# the option-list categories that filter_by_mode understands:
filter_categories = ('triads', 'intervals', 'extensions',
                     'sixths', 'sevenths', 'extended', 'variants', 'added',
                     'alterations', 'inversions')

# which filter category applies to the options of each extension category:
extension_filter_categories = {'6th': 'sixths', '7th': 'sevenths',
                               'extended': 'extended', 'added': 'added'}


def is_advanced_only(option):
    """reads the advanced_only flag from a taxonomy Option, or from a raw dict entry"""
    if isinstance(option, dict):
        return bool(option.get('advanced_only', option.get('advancedOnly', False)))
    return bool(getattr(option, 'advanced_only', False))


def filter_by_mode(options, mode, category, taxonomy=None):
    """returns the subset of 'options' (a mapping of keys to taxonomy entries)
    that is visible in the given mode.

    in 'advanced' mode, options are returned unchanged.
    in 'simple' mode:
        'triads' and 'intervals' keep only the keys in the mode's allow-list,
        'extensions' returns the allow-list itself: a list of extension category keys,
            NOT a mapping, so callers must treat this category specially,
        and every other category drops the options flagged advanced_only.

    an unknown mode or category is a programming error, and raises ValueError."""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    if category not in filter_categories:
        raise ValueError(f'filter_by_mode got unknown category: {category} (expected one of: {filter_categories})')
    if mode not in taxonomy.modes:
        raise ValueError(f'filter_by_mode got unknown mode: {mode} (expected one of: {list(taxonomy.modes)})')

    if mode == 'advanced':
        return options

    config = taxonomy.modes[mode]
    if category in ('triads', 'intervals'):
        allowed = config.allowed(category)
        if allowed == 'all':
            return options
        filtered = {key: opt for key, opt in options.items() if key in allowed}
    elif category == 'extensions':
        allowed = config.allowed(category)
        if allowed == 'all':
            return options
        return list(allowed)
    else:
        filtered = {key: opt for key, opt in options.items() if not is_advanced_only(opt)}

    log(f'{mode} mode keeps {len(filtered)}/{len(options)} {category}')
    return filtered


#### convenience wrappers combining the taxonomy's applicability rules with the filter:

def _mode(mode):
    return _settings.DEFAULT_MODE if mode is None else mode

def visible_triads(mode=None, taxonomy=None):
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    return filter_by_mode(dict(taxonomy.triads), _mode(mode), 'triads', taxonomy)

def visible_intervals(mode=None, taxonomy=None):
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    return filter_by_mode(dict(taxonomy.intervals), _mode(mode), 'intervals', taxonomy)

def visible_extensions(triad, mode=None, taxonomy=None):
    """the extension category keys that can follow this triad quality in this mode, in order"""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    available = taxonomy.available_extensions(triad)
    allowed = filter_by_mode(available, _mode(mode), 'extensions', taxonomy)
    return [ext for ext in available if ext in allowed]

def visible_options(extension_category, triad, mode=None, taxonomy=None):
    """the specific extensions of a category that can be attached to this triad quality in this mode"""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    if extension_category not in extension_filter_categories:
        # 'none', or a category with no options to choose from
        return {}
    options = taxonomy.available_options(extension_category, triad)
    return filter_by_mode(options, _mode(mode), extension_filter_categories[extension_category], taxonomy)

def visible_alterations(extension_category=None, mode=None, taxonomy=None):
    """the alterations legal on top of an extension category in this mode, flattened to a
    single mapping of alteration key to Alteration"""
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    alterations = {alt.key: alt for cat in taxonomy.available_alterations(extension_category).values()
                                for alt in cat.options.values()}
    return filter_by_mode(alterations, _mode(mode), 'alterations', taxonomy)

def visible_inversions(extension_category=None, mode=None, taxonomy=None):
    taxonomy = TAXONOMY if taxonomy is None else taxonomy
    return filter_by_mode(taxonomy.available_inversions(extension_category), _mode(mode), 'inversions', taxonomy)
