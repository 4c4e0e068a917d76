"""Infer the next release of a repository from its version tags."""

__version__ = "0.1.0"
