from .datatypes import AlignResult
from .datatypes import Op
from .datatypes import parse_cigar

from .grep import Config
from .grep import kmp_search_case_insensitive
from .grep import kmp_search_lines
from .grep import search
from .grep import search_case_insensitive

from .kmp import failure_function_table
from .kmp import find_first
from .kmp import kmp_search

from .levenshtein import build_distance_matrix
from .levenshtein import compute_alignment
from .levenshtein import edit_distance
from .levenshtein import get_nice_alignment
from .levenshtein import run_length_encode
from .levenshtein import traceback
from .levenshtein import traceback_ops
from .levenshtein import traceback_path
from .levenshtein import validate_distance_matrix

from .utils import str2bool
from .utils import to_comparable_symbols
from .utils import to_symbols

__version__ = "0.1.0"
