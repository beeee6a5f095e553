"""Container kinds recognized by the reconstructor.

The set is closed: every collection maps onto one of three canonical mutable
containers, and every mapping onto one of four map kinds. Concrete container
types are not preserved, only the structural kind.
"""

from enum import Enum, auto


class CollectionKind(Enum):
    """Canonical collection kinds, decided by capability rather than concrete type."""

    LIST = auto()  # Ordered sequence -> list
    SET = auto()  # Unique members -> set
    QUEUE = auto()  # FIFO with appendleft/popleft -> collections.deque


class MapKind(Enum):
    """Canonical mapping kinds, decided by capability rather than concrete type."""

    HASHED = auto()  # dict
    INSERTION_ORDERED = auto()  # collections.OrderedDict
    SORTED = auto()  # Sorted-map capability (irange/peekitem) -> own type
    DEFAULTING = auto()  # default_factory -> collections.defaultdict
