from .notes import PitchClass, OctaveNote
from .intervals import IntervalDescriptor
from .chords import ChordTemplate, ChordDescriptor
from .selection import TaxonomySelection
from .taxonomy import Taxonomy, TAXONOMY
from .matching import recognise, search_term, parse_search_query
from .naming import build_symbol, generate_filename, generate_folder_path, parse_symbol, parse_filename, build_descriptor
from .modes import filter_by_mode
from .util import MusicError, log
