"""Lists, stacks, AVL trees and hash tables, exercises built on them, and two record-keeping tools."""

__version__ = "0.1.0"