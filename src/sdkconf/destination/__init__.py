"""Destination descriptors."""

from .models import Destination, PathsConfiguration, TripleProperties

__all__ = ["Destination", "PathsConfiguration", "TripleProperties"]
