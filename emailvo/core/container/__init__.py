"""Dependency container.

Usage:
    from emailvo.core.container import get_logger

    logger = get_logger()
"""

from emailvo.core.container.infrastructure import get_logger

__all__ = ["get_logger"]
