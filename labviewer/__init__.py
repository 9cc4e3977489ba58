"""Lab geometry, XML readers and settings command for a maze-robot simulation viewer."""

__version__ = "2.0.0"
__all__ = ["geometry", "replies", "params", "maze", "cli"]