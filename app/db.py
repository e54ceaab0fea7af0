from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event, inspect
import os
import structlog

# Retrieve main logger
logger = structlog.get_logger("main")

db = SQLAlchemy()


def _ensure_sqlite_dir(uri):
    prefix = "sqlite:///"
    if uri.startswith(prefix) and uri != prefix + ":memory:":
        db_dir = os.path.dirname(uri[len(prefix):])
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)


def init_db(app):
    # Register every model on the metadata before create_all
    import models  # noqa: F401

    _ensure_sqlite_dir(app.config["SQLALCHEMY_DATABASE_URI"])

    with app.app_context():
        # Ensure foreign keys, WAL mode, and timeout are set when connection is opened
        @event.listens_for(db.engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            import sqlite3
            if not isinstance(dbapi_connection, sqlite3.Connection):
                return

            # Transactions are started by the begin hook below, not by the driver
            dbapi_connection.isolation_level = None

            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON;")
            # Enable WAL mode for better concurrent access
            cursor.execute("PRAGMA journal_mode=WAL;")
            # Writers wait on each other instead of failing immediately
            cursor.execute("PRAGMA busy_timeout=30000;")
            cursor.close()

        # Take the write lock at the first statement, so reads used for
        # validation and the writes that follow see the same database state
        @event.listens_for(db.engine, "begin")
        def begin_immediate(conn):
            if conn.dialect.name == "sqlite":
                conn.exec_driver_sql("BEGIN IMMEDIATE")

        inspector = inspect(db.engine)
        if not inspector.has_table("tag"):
            logger.info("Initializing database tables...")
        db.create_all()
