"""Queen's Garden: a procedurally revealed card-board game engine."""

__version__ = "1.3.0"
