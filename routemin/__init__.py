"""Customer records, capacity penalties, option parsing and bit helpers for VRPTW route minimization."""

__version__ = "0.1.0"

__all__ = ["bits", "capacity", "cli", "customer", "int96"]