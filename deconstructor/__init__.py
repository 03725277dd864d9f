"""Deconstructor: etymological word decomposition with structural validation."""

__version__ = "0.1.0"
