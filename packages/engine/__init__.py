from .errors import ConstraintError
from .letters import ALPHABET, LetterSet
from .ranges import LetterRange, SingleLetter, compress
from .constraints import ConstraintModel
from .compiler import CompiledPattern, Fixed, Wildcard, compile_pattern
from .validation import is_clean_word, normalize_word

__all__ = [
    "ALPHABET", "ConstraintError", "LetterSet", "LetterRange", "SingleLetter", "compress",
    "ConstraintModel", "CompiledPattern", "Fixed", "Wildcard", "compile_pattern",
    "is_clean_word", "normalize_word",
]
