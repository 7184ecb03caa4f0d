"""Binary trees, search trees, AVL trees and max heaps built from linked nodes."""

__version__ = "0.1.0"
__all__ = ["node", "printing", "demo", "analysis", "bst", "avl", "heap"]