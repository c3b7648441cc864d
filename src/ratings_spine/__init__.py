"""Ratings Spine - stock analyst rating records over HTTP."""

__version__ = "0.1.0"
