############# preference settings:

### DEFAULT_MODE controls which complexity tier of the chord taxonomy is
### exposed to callers that do not ask for one explicitly. must be one of
### 'simple' or 'advanced':
###   'simple' shows common chords only: major/minor/sus4 triads, plain 7ths,
###            add9 chords, and a handful of common intervals.
###   'advanced' shows the full chord vocabulary, with no filtering at all.
### this is a process-wide constant; it is read once by modes.py and is never
### written to by the library itself.
DEFAULT_MODE = 'simple'

### DEFAULT_FILE_EXTENSION is appended to generated sample filenames
### when the caller does not supply an extension of its own.
### it is appended verbatim, so it should include the leading dot.
DEFAULT_FILE_EXTENSION = '.wav'

### FORBIDDEN_FILENAME_CHARS are the characters that cannot appear in
### a generated filename on common filesystems, and get replaced by underscores.
### note that '#' and 'b' are deliberately absent: they carry the meaning
### of a chord symbol (C#m7b5 is not the same chord as Cm7)
FORBIDDEN_FILENAME_CHARS = '<>:"|?*/\\'


############# logging settings:

### VERBOSE controls whether the util.log object prints detailed info
### about recognition and symbol-building to stdout. it can also be toggled
### at runtime by setting util.log.verbose directly.
VERBOSE = False


############# display settings:

# chordfinder objects use little unicode MARKERS in their string methods
# to identify them at a glance. the default markers are defined here, so you
# can change them if you don't like them:
MARKERS = { # class markers used to identify musical object types:
           'PitchClass': '♩',
           'OctaveNote': '♪',
        'ChordTemplate': '♫ ',
      'ChordDescriptor': '♬ ',
    'TaxonomySelection': '⚲ ',
            }

### BRACKETS are used similarly to markers, but placed around the objects they contain:
BRACKETS = { 'IntervalDescriptor': ['‹', '›'],
                   'ChordTemplate': ['¦ ', ' ¦'],
               'TaxonomySelection': ['[', ']'],
            }

### CHARACTERS are used in descriptions to compactly denote certain traits
CHARACTERS = { 'slash_placeholder': 'X', # displayed after a slash when no bass note is known
             }
