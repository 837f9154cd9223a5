"""Shared utilities for the Confluence publisher."""

from .env import is_env_truthy
from .urls import build_page_url

__all__ = ["build_page_url", "is_env_truthy"]
