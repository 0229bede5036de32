"""Defines the AVL tree; every structural method takes a root node and returns the new root."""
from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple

from avlmap.dependency.types import Comparator, KVPair


class AVLTreeNode:
    def __init__(self, kv_pair: KVPair):
        """
        Given a key-value pair, create a new AVL tree node.

        Besides the key and value, a node caches two fields about the subtree rooted at it:
            - Height, the number of nodes on the longest path down to a leaf.
            - Size, the number of nodes in the subtree, including itself.
        :param kv_pair: A KVPair containing key and value.
        """
        self.key: Any = kv_pair.key
        self.value: Any = kv_pair.value
        self.height: int = 1
        self.size: int = 1
        self.left_node: Optional[AVLTreeNode] = None
        self.right_node: Optional[AVLTreeNode] = None

    def __repr__(self) -> str:
        return f"AVLTreeNode(key={self.key!r}, height={self.height}, size={self.size})"


class AVLTree:
    """
    Defines the AVL tree algorithms over a caller-owned root.

    The tree only stores the comparator; the root is passed in and the updated root is handed back.
    """

    def __init__(self, cmp: Comparator):
        """The AVL tree only needs the three-way comparator over keys."""
        if not callable(cmp):
            raise TypeError("The comparator must be a callable taking two keys.")
        self.__cmp = cmp

    @staticmethod
    def get_height(node: Optional[AVLTreeNode]) -> int:
        """Get the height of the input node."""
        # If the node is empty, the height would be 0; otherwise return height.
        return node.height if node else 0

    @staticmethod
    def get_size(node: Optional[AVLTreeNode]) -> int:
        """Get the number of nodes in the subtree of the input node."""
        return node.size if node else 0

    @staticmethod
    def get_balance(node: Optional[AVLTreeNode]) -> int:
        """Get balance of the input node."""
        # If the node is empty, the balance would be 0; otherwise compute the balance.
        return AVLTree.get_height(node.left_node) - AVLTree.get_height(node.right_node) if node else 0

    @staticmethod
    def __maintain(node: AVLTreeNode) -> None:
        """Recompute the cached height and size of the input node from its children."""
        node.height = 1 + max(AVLTree.get_height(node.left_node), AVLTree.get_height(node.right_node))
        node.size = 1 + AVLTree.get_size(node.left_node) + AVLTree.get_size(node.right_node)

    def __rotate_left(self, in_node: AVLTreeNode) -> AVLTreeNode:
        """
        Perform a left rotation at the provided input node.

        :param in_node: Some AVLTreeNode to rotate.
        :return: The parent node of the rotated node.
        """
        # Save the right child of the input node as the parent node.
        p_node = in_node.right_node
        # The input node will be the left child of the parent node; we store its left child to a tmp variable.
        tmp_node = p_node.left_node

        # Now we set the input node as the left child of the parent node.
        p_node.left_node = in_node
        # The left child of the parent node was on the right of the input node.
        in_node.right_node = tmp_node

        # The input node is now the lower one, so it goes first.
        self.__maintain(in_node)
        self.__maintain(p_node)

        # Return the new parent node.
        return p_node

    def __rotate_right(self, in_node: AVLTreeNode) -> AVLTreeNode:
        """
        Perform a right rotation at the provided input node.

        :param in_node: Some AVLTreeNode to rotate.
        :return: The parent node of the rotated node.
        """
        # Save the left child of the input node as the parent node.
        p_node = in_node.left_node
        # The input node will be the right child of the parent node; we store its right child to a tmp variable.
        tmp_node = p_node.right_node

        # Now we set the input node as the right child of the parent node.
        p_node.right_node = in_node
        # The right child of the parent node was on the left of the input node.
        in_node.left_node = tmp_node

        self.__maintain(in_node)
        self.__maintain(p_node)

        # Return the new parent node.
        return p_node

    def __balance(self, node: AVLTreeNode) -> AVLTreeNode:
        """Update the cached fields of a node and re-balance it if it is unbalanced."""
        self.__maintain(node)
        # Get the balance factor.
        balance = self.get_balance(node)

        # Left heavy subtree rotation.
        if balance > 1:
            # The left-right case.
            if self.get_balance(node.left_node) < 0:
                node.left_node = self.__rotate_left(node.left_node)
            # The left-left case.
            return self.__rotate_right(node)

        # Right heavy subtree rotation.
        if balance < -1:
            # The right-left case.
            if self.get_balance(node.right_node) > 0:
                node.right_node = self.__rotate_right(node.right_node)
            # The right-right case.
            return self.__rotate_left(node)

        return node

    def insert(self, root: Optional[AVLTreeNode], kv_pair: KVPair) -> AVLTreeNode:
        """
        Inserts a new node into the tree, which is represented by the root.

        When the key is already present, its value is replaced and the structure is left untouched.
        :param root: The root node of the AVL tree.
        :param kv_pair: A KVPair containing key and value.
        :return: The updated AVL tree root node.
        """
        # If the tree is empty, the new node becomes the root.
        if not root:
            return AVLTreeNode(kv_pair)

        # Create a stack to hold all visited nodes and set root to node for readability.
        stack = []
        node = root

        # Traverse the tree to find the insertion point.
        while node:
            cmp = self.__cmp(node.key, kv_pair.key)
            # An existing key only gets its value replaced.
            if cmp == 0:
                node.value = kv_pair.value
                return root

            # Add visited node to stack.
            stack.append(node)
            # If the key is smaller, we go left.
            if cmp > 0:
                if not node.left_node:
                    node.left_node = AVLTreeNode(kv_pair)
                    break
                node = node.left_node
            # Otherwise go right.
            else:
                if not node.right_node:
                    node.right_node = AVLTreeNode(kv_pair)
                    break
                node = node.right_node

        # Rebalance the tree from the insertion point up to the root.
        while stack:
            # Get the last node and balance it at this position.
            node = stack.pop()
            balanced_node = self.__balance(node)

            # If a parent exists, update which node the parent should point to.
            if stack:
                parent = stack[-1]
                if parent.left_node is node:
                    parent.left_node = balanced_node
                else:
                    parent.right_node = balanced_node
            else:
                return balanced_node

        # The code should not exit the while loop without returning.
        raise ValueError("The node was not successfully inserted.")

    def recursive_insert(self, root: Optional[AVLTreeNode], kv_pair: KVPair) -> AVLTreeNode:
        """
        Inserts a new node into the tree, which is represented by the root.

        We also provide the recursive algorithm to validate the correctness of the non-recursive approach.
        :param root: The root node of the AVL tree.
        :param kv_pair: A KVPair containing key and value.
        :return: The updated AVL tree root node.
        """
        # When we reach an empty root, create a new tree node to store the KV pair.
        if root is None:
            return AVLTreeNode(kv_pair)

        cmp = self.__cmp(root.key, kv_pair.key)
        if cmp == 0:
            root.value = kv_pair.value
            return root
        elif cmp > 0:
            root.left_node = self.recursive_insert(root=root.left_node, kv_pair=kv_pair)
        else:
            root.right_node = self.recursive_insert(root=root.right_node, kv_pair=kv_pair)

        return self.__balance(root)

    @staticmethod
    def __successor(node: AVLTreeNode) -> AVLTreeNode:
        """Find the node holding the next greater key; the input node must have a right child."""
        node = node.right_node
        while node.left_node:
            node = node.left_node
        return node

    def remove(self, root: Optional[AVLTreeNode], key: Any) -> Optional[AVLTreeNode]:
        """
        Removes the node with the provided key from the tree, which is represented by the root.

        Removing a key that is not in the tree leaves the tree unchanged.
        :param root: The root node of the AVL tree.
        :param key: The key to remove.
        :return: The updated AVL tree root node, None if the tree became empty.
        """
        if root is None:
            return None

        cmp = self.__cmp(root.key, key)
        if cmp == 0:
            # No child or a single child, the remaining subtree (possibly empty) takes this slot.
            if root.left_node is None:
                return root.right_node
            if root.right_node is None:
                return root.left_node

            # Two children: copy the successor up and remove it from the right subtree.
            successor = self.__successor(root)
            root.key, root.value = successor.key, successor.value
            root.right_node = self.remove(root=root.right_node, key=successor.key)
        elif cmp > 0:
            root.left_node = self.remove(root=root.left_node, key=key)
        else:
            root.right_node = self.remove(root=root.right_node, key=key)

        return self.__balance(root)

    def search(self, key: Any, root: Optional[AVLTreeNode]) -> Tuple[Any, bool]:
        """
        Performs a search on the provided key and root node.

        :param key: The key to search for.
        :param root: The root node of the AVL tree.
        :return: The value corresponding to the provided search key and whether it was found.
        """
        # While the root is not empty.
        while root:
            cmp = self.__cmp(root.key, key)
            if cmp > 0:
                root = root.left_node
            elif cmp < 0:
                root = root.right_node
            else:
                return root.value, True

        # If never found, return None.
        return None, False

    def get_floor(self, key: Any, root: Optional[AVLTreeNode]) -> Optional[AVLTreeNode]:
        """Find the node with the greatest key less than or equal to the provided key."""
        result = None
        while root:
            cmp = self.__cmp(root.key, key)
            if cmp == 0:
                return root
            if cmp > 0:
                root = root.left_node
            else:
                # This node qualifies; a closer one can only be on the right.
                result = root
                root = root.right_node
        return result

    def get_ceiling(self, key: Any, root: Optional[AVLTreeNode]) -> Optional[AVLTreeNode]:
        """Find the node with the smallest key greater than or equal to the provided key."""
        result = None
        while root:
            cmp = self.__cmp(root.key, key)
            if cmp == 0:
                return root
            if cmp > 0:
                result = root
                root = root.left_node
            else:
                root = root.right_node
        return result

    def get_lower(self, key: Any, root: Optional[AVLTreeNode]) -> Optional[AVLTreeNode]:
        """Find the node with the greatest key strictly less than the provided key."""
        result = None
        while root:
            if self.__cmp(root.key, key) >= 0:
                root = root.left_node
            else:
                result = root
                root = root.right_node
        return result

    def get_higher(self, key: Any, root: Optional[AVLTreeNode]) -> Optional[AVLTreeNode]:
        """Find the node with the smallest key strictly greater than the provided key."""
        result = None
        while root:
            if self.__cmp(root.key, key) <= 0:
                root = root.right_node
            else:
                result = root
                root = root.left_node
        return result

    @staticmethod
    def get_first(root: Optional[AVLTreeNode]) -> Optional[AVLTreeNode]:
        """Find the node with the smallest key."""
        while root and root.left_node:
            root = root.left_node
        return root

    @staticmethod
    def get_last(root: Optional[AVLTreeNode]) -> Optional[AVLTreeNode]:
        """Find the node with the greatest key."""
        while root and root.right_node:
            root = root.right_node
        return root

    @staticmethod
    def iter_nodes(root: Optional[AVLTreeNode]) -> Iterator[AVLTreeNode]:
        """
        Walk the tree in ascending key order.

        The walk uses an explicit stack, so deep trees do not hit the recursion limit.
        :param root: The root node of the AVL tree.
        :return: An iterator over the nodes.
        """
        stack = []
        node = root

        while stack or node:
            # Go as far left as possible, remembering the path.
            while node:
                stack.append(node)
                node = node.left_node
            node = stack.pop()
            yield node
            node = node.right_node
