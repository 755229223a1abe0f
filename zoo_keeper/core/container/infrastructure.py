"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console, human-readable or JSON)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from zoo_keeper.core.config import settings

if TYPE_CHECKING:
    from zoo_keeper.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from zoo_keeper.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.use_json_logs, level=settings.effective_log_level
    )
