"""Transcript request link validator and lookup."""

__version__ = "0.1.0"
