### the chord-finder taxonomy: every root, interval, triad quality, extension, alteration
### and inversion that a chord selection can be built from, along with the rules for
### which of them are legal together. taxonomy.py reads these tables once at import
### and freezes them; nothing else should read them directly.

### option entries may carry the following flags:
###   'available_for': the parent keys (triad qualities, or extension categories) that this
###                    option can be attached to. absent means it is always available.
###   'is_default':    this option is the one chosen when a choice is required but none was made.
###                    at most one option per sibling group may set it.
###   'advanced_only': this option is hidden in 'simple' mode.
### degree strings such as 'b3' or '#5' are chord degrees relative to the root (see parsing.parse_degree).


# the 12 pitch classes that a chord or interval can be built on, in chromatic order:
roots = ['C', 'C#', 'D', 'Eb', 'E', 'F', 'F#', 'G', 'Ab', 'A', 'Bb', 'B']


intervals = {
    'unison':     {'symbol': 'P1', 'semitones': 0,  'name': 'Perfect Unison'},
    'minor2nd':   {'symbol': 'm2', 'semitones': 1,  'name': 'Minor 2nd'},
    'major2nd':   {'symbol': 'M2', 'semitones': 2,  'name': 'Major 2nd'},
    'minor3rd':   {'symbol': 'm3', 'semitones': 3,  'name': 'Minor 3rd'},
    'major3rd':   {'symbol': 'M3', 'semitones': 4,  'name': 'Major 3rd'},
    'perfect4th': {'symbol': 'P4', 'semitones': 5,  'name': 'Perfect 4th'},
    'tritone':    {'symbol': 'A4', 'semitones': 6,  'name': 'Tritone'},
    'perfect5th': {'symbol': 'P5', 'semitones': 7,  'name': 'Perfect 5th'},
    'minor6th':   {'symbol': 'm6', 'semitones': 8,  'name': 'Minor 6th'},
    'major6th':   {'symbol': 'M6', 'semitones': 9,  'name': 'Major 6th'},
    'minor7th':   {'symbol': 'm7', 'semitones': 10, 'name': 'Minor 7th'},
    'major7th':   {'symbol': 'M7', 'semitones': 11, 'name': 'Major 7th'},
    'octave':     {'symbol': 'P8', 'semitones': 12, 'name': 'Perfect Octave'},
    }


# base triad qualities. the major triad has an empty symbol by convention: 'C' means C major.
triad_qualities = {
    'major':      {'symbol': '',     'intervals': ['1', '3', '5'],  'name': 'Major',
                   'available_extensions': ['none', '6th', '7th', 'extended', 'added'], 'is_default': True},
    'minor':      {'symbol': 'm',    'intervals': ['1', 'b3', '5'], 'name': 'Minor',
                   'available_extensions': ['none', '6th', '7th', 'extended', 'added']},
    'augmented':  {'symbol': 'aug',  'intervals': ['1', '3', '#5'], 'name': 'Augmented',
                   'available_extensions': ['none', '7th', 'added'], 'advanced_only': True},
    'diminished': {'symbol': 'dim',  'intervals': ['1', 'b3', 'b5'], 'name': 'Diminished',
                   'available_extensions': ['none', '7th'], 'advanced_only': True},
    'suspended4': {'symbol': 'sus4', 'intervals': ['1', '4', '5'],  'name': 'Suspended 4th',
                   'available_extensions': ['none', '7th', 'extended', 'added']},
    'suspended2': {'symbol': 'sus2', 'intervals': ['1', '2', '5'],  'name': 'Suspended 2nd',
                   'available_extensions': ['none', '7th', 'extended', 'added'], 'advanced_only': True},
    }


# extension categories, in the order they are offered after a triad has been chosen.
# 'extended' options are not suffixes: they carry variants, each of which is a complete
# alternate spelling of the chord (e.g. 'maj9'), replacing the triad symbol entirely.
extension_categories = {
    'none': {'name': 'Triad Only', 'description': 'Just the basic triad', 'options': {}},

    '6th': {'name': '6th Chords', 'description': 'Add the 6th',
            'available_for': ['major', 'minor'],
            'options': {
                'sixth': {'symbol': '6', 'intervals': ['6'], 'name': 'Major or minor 6th chord'},
            }},

    '7th': {'name': '7th Chords', 'description': 'Add a 7th',
            'options': {
                'dominant7':       {'symbol': '7',      'intervals': ['b7'],  'name': 'Dominant 7th',
                                    'available_for': ['major', 'suspended4', 'suspended2'], 'is_default': True},
                'major7':          {'symbol': 'maj7',   'intervals': ['7'],   'name': 'Major 7th',
                                    'available_for': ['major']},
                'minor7':          {'symbol': 'm7',     'intervals': ['b7'],  'name': 'Minor 7th',
                                    'available_for': ['minor']},
                'minorMajor7':     {'symbol': 'm(maj7)', 'intervals': ['7'],  'name': 'Minor Major 7th',
                                    'available_for': ['minor'], 'advanced_only': True},
                'diminished7':     {'symbol': 'dim7',   'intervals': ['bb7'], 'name': 'Diminished 7th',
                                    'available_for': ['diminished'], 'advanced_only': True},
                'halfDiminished7': {'symbol': 'm7b5',   'intervals': ['b7'],  'name': 'Half Diminished 7th',
                                    'available_for': ['diminished']},
                'augmented7':      {'symbol': 'aug7',   'intervals': ['b7'],  'name': 'Augmented 7th',
                                    'available_for': ['augmented'], 'advanced_only': True},
                'augmentedMajor7': {'symbol': 'maj7#5', 'intervals': ['7'],   'name': 'Augmented Major 7th',
                                    'available_for': ['augmented'], 'advanced_only': True},
            }},

    'extended': {'name': 'Extended Chords', 'description': '9th, 11th, 13th (imply lower extensions)',
                 'available_for': ['major', 'minor', 'suspended4', 'suspended2'], 'advanced_only': True,
                 'options': {
                     'ninth':      {'intervals': ['b7', '9'], 'name': '9th Chord',
                                    'available_for': ['major', 'minor'],
                                    'variants': {
                                        'dominant': {'symbol': '9',    'base_chord': 'dom7', 'is_default': True},
                                        'major':    {'symbol': 'maj9', 'base_chord': 'maj7'},
                                        'minor':    {'symbol': 'm9',   'base_chord': 'min7'},
                                    }},
                     'eleventh':   {'intervals': ['b7', '9', '11'], 'name': '11th Chord',
                                    'available_for': ['major', 'minor', 'suspended4'],
                                    'variants': {
                                        'dominant': {'symbol': '11',    'base_chord': 'dom7', 'is_default': True},
                                        'major':    {'symbol': 'maj11', 'base_chord': 'maj7'},
                                        'minor':    {'symbol': 'm11',   'base_chord': 'min7'},
                                    }},
                     'thirteenth': {'intervals': ['b7', '9', '11', '13'], 'name': '13th Chord',
                                    'available_for': ['major', 'minor'],
                                    'variants': {
                                        'dominant': {'symbol': '13',    'base_chord': 'dom7', 'is_default': True},
                                        'major':    {'symbol': 'maj13', 'base_chord': 'maj7'},
                                        'minor':    {'symbol': 'm13',   'base_chord': 'min7'},
                                    }},
                 }},

    'added': {'name': 'Added Notes', 'description': 'Add specific notes without implying others',
              'available_for': ['major', 'minor', 'augmented', 'suspended4', 'suspended2'],
              'options': {
                  'add9':  {'symbol': 'add9',  'intervals': ['9'],  'name': 'Add 9th without 7th', 'is_default': True},
                  'add11': {'symbol': 'add11', 'intervals': ['11'], 'name': 'Add 11th without 7th or 9th', 'advanced_only': True},
                  'add13': {'symbol': 'add13', 'intervals': ['13'], 'name': 'Add 13th without other extensions', 'advanced_only': True},
                  'add2':  {'symbol': 'add2',  'intervals': ['2'],  'name': 'Add 2nd (same as add9 but lower octave)', 'advanced_only': True},
                  'add4':  {'symbol': 'add4',  'intervals': ['4'],  'name': 'Add 4th without suspension', 'advanced_only': True},
              }},
    }

# the chord degrees implied by each base chord that an extended-chord variant is built on:
base_chord_degrees = {'dom7': ['1', '3', '5', 'b7'],
                      'maj7': ['1', '3', '5', '7'],
                      'min7': ['1', 'b3', '5', 'b7']}


# alterations raise or lower a chord degree; they are applied on top of any triad/extension.
alteration_categories = {
    'fifth':      {'name': '5th Alterations',
                   'options': {'sharp5': {'symbol': '#5', 'interval': '#5', 'name': 'Raised 5th'},
                               'flat5':  {'symbol': 'b5', 'interval': 'b5', 'name': 'Lowered 5th'}}},
    'ninth':      {'name': '9th Alterations', 'available_for': ['extended', 'added'],
                   'options': {'sharp9': {'symbol': '#9', 'interval': '#9', 'name': 'Raised 9th'},
                               'flat9':  {'symbol': 'b9', 'interval': 'b9', 'name': 'Lowered 9th'}}},
    'eleventh':   {'name': '11th Alterations',
                   'options': {'sharp11': {'symbol': '#11', 'interval': '#11', 'name': 'Raised 11th'}}},
    'thirteenth': {'name': '13th Alterations',
                   'options': {'flat13': {'symbol': 'b13', 'interval': 'b13', 'name': 'Lowered 13th'}}},
    }


# inversions, by which chord tone sits in the bass:
inversions = {
    'root':   {'symbol': '',   'name': 'Root position', 'is_default': True},
    'first':  {'symbol': '/3', 'name': '1st inversion (3rd in bass)', 'bass_degree': 3},
    'second': {'symbol': '/5', 'name': '2nd inversion (5th in bass)', 'bass_degree': 5},
    'third':  {'symbol': '/7', 'name': '3rd inversion (7th in bass)', 'bass_degree': 7,
               'available_for': ['7th', 'extended']},
    'slash':  {'symbol': '/X', 'name': 'Slash chord (specify bass note)'},
    }


# complexity tiers. "all" means no filtering for that category.
modes = {
    'simple': {'name': 'Simple', 'description': 'Common chords only',
               'triads': ['major', 'minor', 'suspended4'],
               'extensions': ['none', '7th', 'added'],
               'sevenths': ['dominant7', 'major7', 'minor7'],
               'added': ['add9'],
               'intervals': ['perfect5th', 'major3rd', 'perfect4th', 'minor7th', 'major7th']},
    'advanced': {'name': 'Advanced', 'description': 'Full chord vocabulary',
                 'triads': 'all',
                 'extensions': 'all',
                 'sevenths': 'all',
                 'added': 'all',
                 'intervals': 'all'},
    }
