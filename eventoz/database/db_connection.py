"""
PostgreSQL connection helper.
Provides connect() for the application factory and maintenance scripts.
"""

import logging

import psycopg2
from psycopg2.extras import RealDictCursor


def connect(database_url: str):
    """
    Open the process-wide psycopg2 connection with dictionary-based row access.

    The connection runs in autocommit mode: every document operation is a
    single statement, so there is no transaction to hold open between calls.
    psycopg2 connections may be shared between threads; each call opens its
    own cursor.

    Usage:
        conn = connect(settings.database_url)
        with conn.cursor() as cur:
            cur.execute(...)

    Args:
        database_url (str): libpq connection string or URL.

    Returns:
        psycopg2.extensions.connection: A connection using RealDictCursor.

    Raises:
        psycopg2.Error: If the connection fails.
    """
    try:
        conn = psycopg2.connect(database_url, cursor_factory=RealDictCursor)
    except psycopg2.Error as e:
        logging.error(f"Error connecting to database: {e}")
        raise
    conn.autocommit = True
    return conn
