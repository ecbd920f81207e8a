import logging

from sqlalchemy import event

from .logger import logger


def register_events(engine):
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        if engine.dialect.name != "sqlite":
            return

        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "before_cursor_execute")
    def _log_statement(conn, cursor, statement, parameters, context, executemany):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"SQL: {statement} {parameters}")
