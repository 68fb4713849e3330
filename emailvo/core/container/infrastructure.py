"""Infrastructure singletons.

Composition root for process-wide services. Each accessor is cached
with lru_cache; call .cache_clear() to rebuild after a settings change.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from emailvo.core.config import get_settings

if TYPE_CHECKING:
    from emailvo.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the process-wide logger singleton.

    Renderer selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    settings = get_settings()
    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )

    from emailvo.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(use_json=env != "development", level=settings.log_level)
