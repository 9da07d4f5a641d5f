from .core import iter_matches, run_query
from .io import write_results, write_manifest

__all__ = ["iter_matches", "run_query", "write_results", "write_manifest"]
