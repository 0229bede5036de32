"""Defines the ordered map constructed with the AVL tree."""
from typing import Any, Iterable, Iterator, Optional, Tuple, Union

from avlmap.dependency import AVLTree, AVLTreeNode, Comparator, KVPair

# What the neighbor queries hand back: (key, value, found).
Entry = Tuple[Any, Any, bool]


class BalancedOrderedMap:
    """
    An ordered key-value container backed by an AVL tree.

    Keys are ordered by the comparator given at construction; no default ordering is ever assumed. Absent keys are
    reported through a found flag next to None placeholders rather than by raising. The map is not thread safe.
    """

    def __init__(self, cmp: Comparator, kv_pairs: Optional[Iterable[Union[KVPair, Tuple[Any, Any]]]] = None):
        """
        Initialize the map with a comparator and optionally some starting entries.

        :param cmp: A three-way comparator over keys, returning negative, zero or positive.
        :param kv_pairs: Key-value pairs, either KVPair objects or (key, value) tuples, inserted in order.
        """
        self.__tree = AVLTree(cmp=cmp)
        self.__root: Optional[AVLTreeNode] = None

        for kv_pair in kv_pairs or []:
            if not isinstance(kv_pair, KVPair):
                kv_pair = KVPair(*kv_pair)
            self.__root = self.__tree.insert(root=self.__root, kv_pair=kv_pair)

    @property
    def root(self) -> Optional[AVLTreeNode]:
        """The root node of the underlying tree, None when the map is empty."""
        return self.__root

    @staticmethod
    def __to_entry(node: Optional[AVLTreeNode]) -> Entry:
        """Convert a query result node to the (key, value, found) triple."""
        if node is None:
            return None, None, False
        return node.key, node.value, True

    def __len__(self) -> int:
        return AVLTree.get_size(self.__root)

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __repr__(self) -> str:
        return f"BalancedOrderedMap({list(self.items())!r})"

    def get(self, key: Any) -> Tuple[Any, bool]:
        """
        Look up the value stored under the key.

        :param key: The key to search for.
        :return: (value, True) if found, (None, False) otherwise.
        """
        return self.__tree.search(key=key, root=self.__root)

    def has(self, key: Any) -> bool:
        """Check whether the key is in the map."""
        _, found = self.get(key)
        return found

    def must_get(self, key: Any, default: Any = None) -> Any:
        """Get the value stored under the key, or the default when the key is absent."""
        value, found = self.get(key)
        return value if found else default

    def get_floor(self, key: Any) -> Entry:
        """Get the entry with the greatest key less than or equal to the key."""
        return self.__to_entry(self.__tree.get_floor(key=key, root=self.__root))

    def get_ceiling(self, key: Any) -> Entry:
        """Get the entry with the smallest key greater than or equal to the key."""
        return self.__to_entry(self.__tree.get_ceiling(key=key, root=self.__root))

    def get_lower(self, key: Any) -> Entry:
        """Get the entry with the greatest key strictly less than the key."""
        return self.__to_entry(self.__tree.get_lower(key=key, root=self.__root))

    def get_higher(self, key: Any) -> Entry:
        """Get the entry with the smallest key strictly greater than the key."""
        return self.__to_entry(self.__tree.get_higher(key=key, root=self.__root))

    def get_first(self) -> Entry:
        """Get the entry with the smallest key."""
        return self.__to_entry(AVLTree.get_first(self.__root))

    def get_last(self) -> Entry:
        """Get the entry with the greatest key."""
        return self.__to_entry(AVLTree.get_last(self.__root))

    def insert(self, key: Any, value: Any) -> None:
        """
        Insert a key-value pair; an existing key gets its value replaced.

        :param key: The key to insert.
        :param value: The value to store under the key.
        """
        self.__root = self.__tree.insert(root=self.__root, kv_pair=KVPair(key=key, value=value))

    def remove(self, key: Any) -> None:
        """Remove the key from the map if it is present."""
        self.__root = self.__tree.remove(root=self.__root, key=key)

    def clear(self) -> None:
        """Remove every entry."""
        self.__root = None

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Iterate over (key, value) pairs in ascending key order."""
        for node in AVLTree.iter_nodes(self.__root):
            yield node.key, node.value

    def keys(self) -> Iterator[Any]:
        """Iterate over keys in ascending order."""
        for node in AVLTree.iter_nodes(self.__root):
            yield node.key

    def values(self) -> Iterator[Any]:
        """Iterate over values in ascending key order."""
        for node in AVLTree.iter_nodes(self.__root):
            yield node.value
