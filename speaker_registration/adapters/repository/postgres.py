"""
PostgreSQL repository adapter - Implements SpeakerRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

The speaker row and all of its session rows are written in a single
transaction: either the whole aggregate is stored or nothing is.
"""

import logging
from pathlib import Path

from psycopg_pool import ConnectionPool

from speaker_registration.domain.models import Speaker

logger = logging.getLogger(__name__)


class PostgresSpeakerRepository:
    """
    Implements SpeakerRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def save_speaker(self, speaker: Speaker) -> int:
        """
        Insert a speaker and their sessions.

        Args:
            speaker: Evaluated speaker (fee set, sessions approved/rejected)

        Returns:
            Database-assigned speaker id

        Raises:
            psycopg.Error: On any database failure (transaction rolled back)
        """
        speaker_sql = """
            INSERT INTO speakers (
                first_name, last_name, email, years_experience, has_blog, blog_url,
                employer, certifications, browser_name, browser_major_version,
                registration_fee, created_at
            )
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, NOW())
            RETURNING id
        """

        session_sql = """
            INSERT INTO sessions (speaker_id, position, title, description, approved)
            VALUES (%s, %s, %s, %s, %s)
        """

        browser = speaker.browser
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(
                speaker_sql,
                (
                    speaker.first_name,
                    speaker.last_name,
                    speaker.email,
                    speaker.years_experience,
                    speaker.has_blog,
                    speaker.blog_url,
                    speaker.employer,
                    list(speaker.certifications),
                    browser.name.value if browser is not None else None,
                    browser.major_version if browser is not None else None,
                    speaker.registration_fee,
                ),
            )
            speaker_id = cursor.fetchone()[0]

            cursor.executemany(
                session_sql,
                [
                    (speaker_id, position, session.title, session.description, session.approved)
                    for position, session in enumerate(speaker.sessions)
                ],
            )
            conn.commit()

        logger.info("Saved speaker %s with id %s", speaker.email, speaker_id)
        return speaker_id


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: speaker_registration/adapters/repository/postgres.py -> migrations/
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
