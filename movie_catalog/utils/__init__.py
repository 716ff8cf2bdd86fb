"""Shared utilities."""

from movie_catalog.utils.logger import setup_logger

__all__ = ["setup_logger"]
