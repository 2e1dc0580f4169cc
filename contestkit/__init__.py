"""Patterns, a reproducible random generator, text helpers and reference solutions for contest problems."""

__version__ = "0.9.5"