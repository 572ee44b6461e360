"""Checking small, self-checking programming exercises and tracking progress."""

__version__ = "5.2.1"