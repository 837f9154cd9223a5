"""Preprocessing modules for converting Markdown into Confluence markup."""

from .confluence import ConfluencePreprocessor

__all__ = ["ConfluencePreprocessor"]
