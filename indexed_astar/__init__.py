"""Generic A* search backed by an indexed min-heap."""

from .config import SearchSettings
from .heap import HeapCorruptionError, IndexedMinHeap
from .search import (
    SearchBudgetExceeded,
    SearchStats,
    find_path,
    find_path_with_cost,
    reconstruct_path,
)

__version__ = "0.1.0"

__all__ = [
    "HeapCorruptionError",
    "IndexedMinHeap",
    "SearchBudgetExceeded",
    "SearchSettings",
    "SearchStats",
    "find_path",
    "find_path_with_cost",
    "reconstruct_path",
    "__version__",
]
