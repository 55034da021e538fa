"""Examples package for crustier.

Keeps the sample drawing importable as
``crustier.examples.sample``.
"""

from crustier.examples import sample as sample

__all__ = ["sample"]
