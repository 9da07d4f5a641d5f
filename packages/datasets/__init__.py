from .validator import validate_wordlist, pretty_summary
from .io import iter_lines, iter_words, merge_wordlists, read_lines, write_lines

__all__ = ["validate_wordlist", "pretty_summary", "iter_lines", "iter_words", "merge_wordlists",
           "read_lines", "write_lines"]
