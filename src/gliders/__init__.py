"""Loren's asteroid gliders: massless particles drifting along equipotentials."""

__version__ = "0.1.0"
