"""Data loaders for crustier.

Currently includes the diagram document loader.
"""

from .diagrams import (
    DiagramLoadError,
    dump_diagram,
    load_diagram,
    load_diagram_file,
    save_diagram_file,
)

__all__ = [
    "DiagramLoadError",
    "dump_diagram",
    "load_diagram",
    "load_diagram_file",
    "save_diagram_file",
]
