"""
Create the document table and its indexes.

Run once against a fresh database (safe to re-run):

    python -m eventoz.database.init_db
"""

import logging
import os
import sys

import psycopg2
from dotenv import load_dotenv

from eventoz.database.db_connection import connect
from eventoz.database.document_store import PostgresDocumentStore
from eventoz.errors import StoreError


def init_db(database_url: str) -> None:
    conn = connect(database_url)
    try:
        PostgresDocumentStore(conn).create_schema()
    finally:
        conn.close()


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(asctime)s - %(message)s")
    load_dotenv()

    # Only the database is needed here, not the token secret.
    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        logging.error("DATABASE_URL is not set. Please set the environment variable.")
        return 1

    try:
        init_db(database_url)
    except (StoreError, psycopg2.Error) as e:
        logging.error(f"Schema creation FAILED: {e}")
        return 1

    logging.info("Schema ready: documents table and indexes exist.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
