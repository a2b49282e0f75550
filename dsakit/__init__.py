"""Classic data structures and algorithms: stacks, linked lists, search trees, graphs, searching, sorting, shortest paths, maximum subarray and subset sums."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "graph",
    "inputs",
    "linked_lists",
    "searching",
    "shortest_paths",
    "sorting",
    "stacks",
    "subarray",
    "subset_sum",
]