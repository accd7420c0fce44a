"""naturalsort orders strings the way people read numbers in them."""

from .config import NaturalSortConfig
from .errors import DigitRunError, InputError, NaturalSortError
from .natural import (
    Ordering,
    compare,
    natural_key,
    natural_sort,
    precedes,
    sorted_naturally,
)

__all__ = [
    "DigitRunError",
    "InputError",
    "NaturalSortConfig",
    "NaturalSortError",
    "Ordering",
    "compare",
    "natural_key",
    "natural_sort",
    "precedes",
    "sorted_naturally",
]
