from avlmap.dependency import (
    AVLTree,
    AVLTreeNode,
    Comparator,
    KVPair,
    cmp_greater,
    cmp_less,
    cmp_slice_greater,
    cmp_slice_less,
)
from avlmap.omap import BalancedOrderedMap
