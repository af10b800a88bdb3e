"""
Core utilities and configuration for the OpenSearch assistant toolkit.

This package provides logging configuration and environment-backed settings.
"""

from opensearch_assistant.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
