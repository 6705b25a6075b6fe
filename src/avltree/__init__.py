from .avl_tree import AVLTree, NodeEntry

__all__ = ['AVLTree', 'NodeEntry']
