"""Structured-interview candidate evaluation and role assignment."""

__version__ = "0.1.0"
