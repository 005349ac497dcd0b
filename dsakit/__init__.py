"""Classic data-structure and algorithm routines: arrays, stacks, sliding windows,
linked lists, binary trees and search trees, dynamic programming and graphs."""

__version__ = "0.1.0"