"""Reading and writing grade records and weight configurations."""

from . import records
from . import weights

__all__ = ["records", "weights"]
