"""Algorithm and data-structure routines for trees, lists, containers, searching, arrays, strings and numbers."""

__version__ = "0.1.0"

__all__ = [
    "tree_build",
    "tree_query",
    "bst_edit",
    "linked_lists",
    "containers",
    "searching",
    "arrays",
    "strings",
    "number_theory",
]