"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import event, text
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import get_config


def _unicode_lower(value: str | None) -> str | None:
    return value.lower() if value is not None else None


def register_sqlite_functions(dbapi_connection, connection_record) -> None:
    """Replace SQLite's ASCII-only `lower()` with a Unicode-aware one.

    Installed as a `connect` listener on SQLite engines.
    """
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


class DbSessionService:
    def __init__(self):
        """Initialize the shared database engine and session factory."""

        main_config = get_config()
        db_config = main_config.database

        logger.info(
            "Configuring database engine for environment: {}",
            main_config.app.environment,
        )
        engine_kwargs: dict[str, Any] = {
            # Set to True only when debugging specific SQL issues
            "echo": False,
            "echo_pool": False,
            "connect_args": self._get_connect_args(main_config),
        }

        if db_config.is_sqlite:
            if db_config.url in ("sqlite://", "sqlite:///:memory:"):
                # Every connection to :memory: is a fresh database; share one
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,  # Validate connections before use
                }
            )

        self._engine = create_engine(db_config.connection_string, **engine_kwargs)
        if db_config.is_sqlite:
            event.listen(self._engine, "connect", register_sqlite_functions)
        logger.info("Database engine initialized for {}", self._engine.url)

    @property
    def engine(self):
        return self._engine

    def _get_connect_args(self, config: ConfigData) -> dict:
        """Get database-specific connection arguments."""
        connect_args = {}

        if "postgresql" in config.database.url:
            connect_args.update(
                {
                    # Application name for connection tracking
                    "application_name": f"{config.app.name}_{config.app.environment}",
                    "connect_timeout": 30,
                }
            )

        elif config.database.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,  # Sessions cross threadpool workers
                    "timeout": 20,  # Lock timeout
                }
            )

            if config.app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )

        return connect_args

    def create_all(self) -> None:
        """Create all database tables that do not exist yet."""
        from sqlmodel import SQLModel

        from src.catalog.entities.service.book import BookTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Prevent lazy loading issues
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Context manager style helper for scripts and tests."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {}: {}", type(e).__name__, e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error(
                "Database health check failed: {}: {}", type(e).__name__, e
            )
            return False

    def dispose(self) -> None:
        """Close every pooled connection."""
        self._engine.dispose()
