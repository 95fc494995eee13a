"""Random dummy values of built-in and standard-library types for tests."""

__version__ = "0.1.0"