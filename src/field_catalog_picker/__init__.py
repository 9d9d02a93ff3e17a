"""Flat, searchable custom-field catalog with an embeddable selector engine."""

__version__ = "0.1.0"
