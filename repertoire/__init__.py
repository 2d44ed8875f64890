"""Study and practise chess opening repertoires from the terminal."""

__version__ = "0.1.0"
__all__ = ["__version__"]