import pytest

from avlmap import AVLTree, cmp_less


def _check_node(node, cmp):
    """Recursively verify the subtree rooted at node; returns its (height, size)."""
    if node is None:
        return 0, 0

    l_height, l_size = _check_node(node.left_node, cmp)
    r_height, r_size = _check_node(node.right_node, cmp)

    # The keys must be ordered around this node.
    if node.left_node is not None:
        assert cmp(AVLTree.get_last(node.left_node).key, node.key) < 0
    if node.right_node is not None:
        assert cmp(AVLTree.get_first(node.right_node).key, node.key) > 0

    # The node must be balanced and the cached fields must be fresh.
    assert abs(l_height - r_height) <= 1, f"{node} is unbalanced"
    assert node.height == 1 + max(l_height, r_height), f"{node} has a stale height"
    assert node.size == 1 + l_size + r_size, f"{node} has a stale size"

    return node.height, node.size


@pytest.fixture
def check_tree():
    """Provide a checker asserting the AVL invariants of a tree root under a comparator."""

    def check(root, cmp=cmp_less):
        _check_node(root, cmp)

    return check
