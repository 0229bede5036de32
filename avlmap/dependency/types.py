from dataclasses import dataclass
from typing import Any, Callable, Tuple

# A three-way comparator: negative when a < b, zero when equal, positive when a > b.
Comparator = Callable[[Any, Any], int]


@dataclass
class KVPair:
    """A key-value pair with named access."""
    key: Any
    value: Any

    def to_tuple(self) -> Tuple[Any, Any]:
        """Convert to a tuple (key, value)."""
        return self.key, self.value
