"""Infrastructure dependency factories.

Application-scoped singletons:
- Database (PostgreSQL/SQLite)
- Logging (structlog console adapter)
- Email (SendGrid or stub)
- CSV exporter

Plus the request-scoped database session.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.csv_exporter_protocol import CsvExporterProtocol
    from src.domain.protocols.email_protocol import EmailProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Returns:
        SendGridEmailService when SENDGRID_API_KEY is set,
        StubEmailService (log only) otherwise.
    """
    from src.infrastructure.email import SendGridEmailService, StubEmailService

    if settings.email_enabled:
        return SendGridEmailService(settings=settings, logger=get_logger())
    return StubEmailService(logger=get_logger())


@lru_cache()
def get_csv_exporter() -> "CsvExporterProtocol":
    """Get CSV exporter singleton (stateless)."""
    from src.infrastructure.export import CsvExporter

    return CsvExporter()


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits when the request completes, rolls back on exception, always
    closes.

    Usage:
        session: AsyncSession = Depends(get_db_session)
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
