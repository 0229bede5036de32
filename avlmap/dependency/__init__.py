from avlmap.dependency.avl_tree import AVLTree, AVLTreeNode
from avlmap.dependency.compare import cmp_greater, cmp_less, cmp_slice_greater, cmp_slice_less
from avlmap.dependency.types import Comparator, KVPair
