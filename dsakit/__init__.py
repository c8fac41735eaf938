"""Classic data structures and algorithms: arrays, searching, sorting, queues, stacks, graph, sudoku and patterns."""

__version__ = "0.1.0"

__all__ = ["arrays", "graph", "patterns", "queues", "searching", "sorting", "stacks", "sudoku"]