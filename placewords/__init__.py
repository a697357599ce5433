"""Encode S2 cell ids and coordinates as short memorable word addresses."""

__version__ = "0.1.0"
__all__ = ["__version__"]