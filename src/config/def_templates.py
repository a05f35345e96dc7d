### chord templates used by the pitch-set recognizer (see matching.py).
### each template is a set of semitone offsets above an assumed root; a set of notes
### matches a template when every one of the template's offsets is present.
### offsets above the octave (e.g. 14 for a 9th) are wrapped mod 12 when the table is built.

### THE ORDER OF THIS LIST IS THE RECOGNITION PRIORITY: for each candidate root, templates are
### tried top to bottom and the first match wins. triads come first, then 7ths, 6ths,
### 9ths and add9s. changing the order changes which chord is reported for a voicing.

### the selection fields ('triad', 'extension_category', 'specific_extension', 'extension_variant')
### name the taxonomy entry that builds the same chord, so that a recognised chord can be
### turned back into a TaxonomySelection.

templates = [
    # triads
    {'key': 'major',      'offsets': [0, 4, 7], 'suffix': '',     'name': 'major',          'family': 'triad',
     'triad': 'major'},
    {'key': 'minor',      'offsets': [0, 3, 7], 'suffix': 'm',    'name': 'minor',          'family': 'triad',
     'triad': 'minor'},
    {'key': 'diminished', 'offsets': [0, 3, 6], 'suffix': 'dim',  'name': 'diminished',     'family': 'triad',
     'triad': 'diminished'},
    {'key': 'augmented',  'offsets': [0, 4, 8], 'suffix': 'aug',  'name': 'augmented',      'family': 'triad',
     'triad': 'augmented'},
    {'key': 'sus4',       'offsets': [0, 5, 7], 'suffix': 'sus4', 'name': 'suspended 4th',  'family': 'triad',
     'triad': 'suspended4'},
    {'key': 'sus2',       'offsets': [0, 2, 7], 'suffix': 'sus2', 'name': 'suspended 2nd',  'family': 'triad',
     'triad': 'suspended2'},

    # 7th chords
    {'key': 'maj7',     'offsets': [0, 4, 7, 11], 'suffix': 'maj7',    'name': 'major 7th',           'family': '7th',
     'triad': 'major', 'extension_category': '7th', 'specific_extension': 'major7',
     'available_for': ['major']},
    {'key': 'min7',     'offsets': [0, 3, 7, 10], 'suffix': 'm7',      'name': 'minor 7th',           'family': '7th',
     'triad': 'minor', 'extension_category': '7th', 'specific_extension': 'minor7',
     'available_for': ['minor']},
    {'key': 'dom7',     'offsets': [0, 4, 7, 10], 'suffix': '7',       'name': 'dominant 7th',        'family': '7th',
     'triad': 'major', 'extension_category': '7th', 'specific_extension': 'dominant7',
     'available_for': ['major', 'suspended4', 'suspended2']},
    {'key': 'dim7',     'offsets': [0, 3, 6, 9],  'suffix': 'dim7',    'name': 'diminished 7th',      'family': '7th',
     'triad': 'diminished', 'extension_category': '7th', 'specific_extension': 'diminished7',
     'available_for': ['diminished']},
    {'key': 'halfDim7', 'offsets': [0, 3, 6, 10], 'suffix': 'm7b5',    'name': 'half diminished 7th', 'family': '7th',
     'triad': 'diminished', 'extension_category': '7th', 'specific_extension': 'halfDiminished7',
     'available_for': ['diminished']},
    {'key': 'minMaj7',  'offsets': [0, 3, 7, 11], 'suffix': 'm(maj7)', 'name': 'minor major 7th',     'family': '7th',
     'triad': 'minor', 'extension_category': '7th', 'specific_extension': 'minorMajor7',
     'available_for': ['minor']},

    # 6th chords
    {'key': 'maj6', 'offsets': [0, 4, 7, 9], 'suffix': '6',  'name': 'major 6th', 'family': '6th',
     'triad': 'major', 'extension_category': '6th', 'specific_extension': 'sixth'},
    {'key': 'min6', 'offsets': [0, 3, 7, 9], 'suffix': 'm6', 'name': 'minor 6th', 'family': '6th',
     'triad': 'minor', 'extension_category': '6th', 'specific_extension': 'sixth'},

    # extended chords (9th)
    {'key': 'dom9', 'offsets': [0, 4, 7, 10, 14], 'suffix': '9',    'name': 'dominant 9th', 'family': 'extended',
     'triad': 'major', 'extension_category': 'extended', 'specific_extension': 'ninth', 'extension_variant': 'dominant',
     'available_for': ['major']},
    {'key': 'maj9', 'offsets': [0, 4, 7, 11, 14], 'suffix': 'maj9', 'name': 'major 9th',    'family': 'extended',
     'triad': 'major', 'extension_category': 'extended', 'specific_extension': 'ninth', 'extension_variant': 'major',
     'available_for': ['major']},
    {'key': 'min9', 'offsets': [0, 3, 7, 10, 14], 'suffix': 'm9',   'name': 'minor 9th',    'family': 'extended',
     'triad': 'minor', 'extension_category': 'extended', 'specific_extension': 'ninth', 'extension_variant': 'minor',
     'available_for': ['minor']},

    # add9 chords (no 7th)
    {'key': 'add9',     'offsets': [0, 4, 7, 14], 'suffix': 'add9',    'name': 'add 9th',       'family': 'added',
     'triad': 'major', 'extension_category': 'added', 'specific_extension': 'add9'},
    {'key': 'min_add9', 'offsets': [0, 3, 7, 14], 'suffix': 'm(add9)', 'name': 'minor add 9th', 'family': 'added',
     'triad': 'minor', 'extension_category': 'added', 'specific_extension': 'add9'},
    ]
