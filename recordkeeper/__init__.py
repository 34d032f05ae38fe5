"""Worked examples of one-way, two-way and mediated object relationships."""

__version__ = "0.1.0"
