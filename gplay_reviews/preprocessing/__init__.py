"""Preprocessing of collected reviews"""

from .filter import ReviewFilter

__all__ = ["ReviewFilter"]
