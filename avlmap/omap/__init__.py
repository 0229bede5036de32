from avlmap.omap.avl_omap import BalancedOrderedMap
