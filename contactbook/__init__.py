"""An eight-slot interactive phone book and a megaphone command."""

__version__ = "0.1.0"
__all__ = ["__version__"]