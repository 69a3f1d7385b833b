"""
PostgreSQL repository adapter - Implements AccountStore protocol.

This module provides the PostgreSQL implementation of the domain's
account store port using psycopg3 with raw SQL.

Uniqueness of email is enforced by the UNIQUE constraint on users.email.
New accounts are inserted with ON CONFLICT DO NOTHING so a duplicate
signup is detected from the empty RETURNING result rather than from an
IntegrityError. Existing accounts are updated by primary key; email is
never rewritten.
"""

import logging
from dataclasses import replace
from pathlib import Path

from psycopg_pool import ConnectionPool

from src.domain.account import Account
from src.domain.exceptions import AccountNotPersisted, EmailAlreadyRegistered

logger = logging.getLogger(__name__)

_COLUMNS = (
    "id, username, email, password_hash, enabled, "
    "verification_code, verification_code_expires_at, created_at"
)


def _row_to_account(row: tuple) -> Account:
    """Map a users row (in _COLUMNS order) to an Account."""
    return Account(
        id=row[0],
        username=row[1],
        email=row[2],
        password_hash=row[3],
        enabled=row[4],
        verification_code=row[5],
        verification_code_expires_at=row[6],
        created_at=row[7],
    )


class PostgresAccountStore:
    """
    Implements AccountStore protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize store with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def find_by_email(self, email: str) -> Account | None:
        """
        Fetch an account by exact (case-sensitive) email.

        Args:
            email: Email address as stored

        Returns:
            Account or None if no row matches
        """
        sql = f"SELECT {_COLUMNS} FROM users WHERE email = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()

        return _row_to_account(row) if row is not None else None

    def save(self, account: Account) -> Account:
        """
        Insert a new account or update an existing one.

        Args:
            account: Account to persist; id None means insert

        Returns:
            Persisted account with id and created_at populated

        Raises:
            EmailAlreadyRegistered: If an insert collides on email
            AccountNotPersisted: If an update matches no row
        """
        if account.id is None:
            return self._insert(account)
        return self._update(account)

    def _insert(self, account: Account) -> Account:
        sql = """
            INSERT INTO users (username, email, password_hash, enabled,
                               verification_code, verification_code_expires_at, created_at)
            VALUES (%s, %s, %s, %s, %s, %s, NOW())
            ON CONFLICT (email) DO NOTHING
            RETURNING id, created_at
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(
                sql,
                (
                    account.username,
                    account.email,
                    account.password_hash,
                    account.enabled,
                    account.verification_code,
                    account.verification_code_expires_at,
                ),
            )
            row = cursor.fetchone()
            conn.commit()

        if row is None:
            raise EmailAlreadyRegistered(account.email)

        return replace(account, id=row[0], created_at=row[1])

    def _update(self, account: Account) -> Account:
        sql = """
            UPDATE users
            SET username = %s,
                password_hash = %s,
                enabled = %s,
                verification_code = %s,
                verification_code_expires_at = %s
            WHERE id = %s
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(
                sql,
                (
                    account.username,
                    account.password_hash,
                    account.enabled,
                    account.verification_code,
                    account.verification_code_expires_at,
                    account.id,
                ),
            )
            updated = cursor.rowcount
            conn.commit()

        if updated == 0:
            raise AccountNotPersisted(account.email)

        return replace(account)


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
