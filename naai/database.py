"""Database configuration and session management."""

from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base: Any = declarative_base()


class Database:
    """Owns the engine and session factory for one database URL.

    One instance lives for the whole process (``app.state.database``); each
    request borrows a session from it through :func:`get_db`.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        if make_url(url).get_backend_name() == "sqlite":
            self.engine = create_engine(
                url, echo=echo, connect_args={"check_same_thread": False}
            )
        else:
            self.engine = create_engine(
                url,
                echo=echo,
                pool_pre_ping=True,
                pool_size=5,
                max_overflow=10,
            )
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @property
    def masked_url(self) -> str:
        """The connection URL with the password hidden."""
        return make_url(self.url).render_as_string(hide_password=True)

    def session(self) -> Generator[Session, None, None]:
        """Yield a session and close it afterwards."""
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def ping(self) -> None:
        """Run a trivial query; raises if the database is unreachable."""
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def table_names(self) -> list[str]:
        """Names of the tables that currently exist."""
        return inspect(self.engine).get_table_names()

    def create_all(self) -> None:
        """Create all tables known to the models."""
        # Import all models here so they are registered with Base.metadata
        from naai import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        """Release every pooled connection."""
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    database: Database = request.app.state.database
    yield from database.session()


def connection_error_hints(error: Exception | str) -> list[str]:
    """Remediation steps for a failed database connection, keyed on the error text."""
    message = str(error)
    if "sha256_password" in message or "caching_sha2_password" in message:
        return [
            "Fix the MySQL authentication plugin:",
            "  1. Connect to MySQL as root: mysql -u root -p",
            "  2. ALTER USER 'your_username'@'localhost' IDENTIFIED WITH "
            "mysql_native_password BY 'your_password';",
            "  3. FLUSH PRIVILEGES;",
        ]
    if "Access denied" in message or "password authentication failed" in message:
        return ["Invalid credentials: update DATABASE_URL in your .env file."]
    if "Connection refused" in message or "ECONNREFUSED" in message:
        return ["The database server is not running or not reachable on the configured port."]
    if "Unknown database" in message or ("database" in message and "does not exist" in message):
        return ["The database does not exist: create it, then run `alembic upgrade head`."]
    return []
