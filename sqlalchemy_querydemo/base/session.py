from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ..config import Config
from ..events import register_events
from ..logger import logger


def build_engine(config: Config):
    engine = create_engine(config.database_url, echo=config.echo)
    register_events(engine)
    return engine


class SessionScope:
    """
    One session bound to one ambient transaction.

    ``open_session()`` must be paired with ``close_session()``; used as a
    context manager the pair is guaranteed: a clean exit commits, an exception
    rolls back, and the session is released on every path.
    """

    def __init__(self, config: Config = None, engine=None):
        self.config = config
        self.engine = engine
        self.session = None

        # Only dispose engines we built ourselves
        self._owns_engine = False

    @property
    def is_open(self):
        return self.session is not None

    def open_session(self):
        if self.is_open:
            raise RuntimeError("Session is already open")

        if self.engine is None:
            if self.config is None:
                self.config = Config.from_env()

            logger.debug(f"Building engine for {self.config.database_url}")
            self.engine = build_engine(self.config)
            self._owns_engine = True

        factory = sessionmaker(self.engine, expire_on_commit=False)
        self.session = factory()
        self.session.begin()
        logger.debug("Session opened")
        return self.session

    def close_session(self, commit=True):
        if not self.is_open:
            return

        try:
            if commit:
                logger.debug("Committing ...")
                self.session.commit()
            else:
                logger.debug("Rolling back ...")
                self.session.rollback()
        finally:
            self.session.close()
            self.session = None

            if self._owns_engine:
                self.engine.dispose()
                self.engine = None
                self._owns_engine = False

            logger.debug("Session closed")

    def _require_session(self):
        if not self.is_open:
            raise RuntimeError("No open session, call open_session() first")
        return self.session

    def __enter__(self):
        self.open_session()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close_session(commit=exc_type is None)
        return False
