"""Clash configuration YAML highlighting and validation."""

__version__ = "0.4.0"
