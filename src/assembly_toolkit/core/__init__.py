"""
Assembly Toolkit Core Package

Shared data models, lexicon schemas and serialization utilities. These
models are the single vocabulary used by the dictionary, the link and
solution collaborators, and the selection callbacks.
"""

from .models import Connector, Point, Section, Link, Frame, Odometer

__all__ = [
    "Connector",
    "Point",
    "Section",
    "Link",
    "Frame",
    "Odometer",
]
