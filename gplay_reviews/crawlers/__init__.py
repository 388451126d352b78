"""Crawlers module for app stores"""

from .base import BaseCrawler
from .playstore import PlayStoreCrawler

__all__ = ["BaseCrawler", "PlayStoreCrawler"]
