"""Classic data structures and algorithms: binary search, linked lists, multisets, stacks, permutations and container demos."""

__version__ = "0.1.0"
__all__ = ["search", "linked_list", "multiset", "stack", "permutation", "demo"]