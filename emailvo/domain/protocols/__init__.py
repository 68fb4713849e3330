"""Domain protocols.

Usage:
    from emailvo.domain.protocols import LoggerProtocol
"""

from emailvo.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
