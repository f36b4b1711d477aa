from .errors import LoaderError
from .tree_loader import load_tree, load_tree_spec

__all__ = ["load_tree", "load_tree_spec", "LoaderError"]
