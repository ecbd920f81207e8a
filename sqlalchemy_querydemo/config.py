import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///querydemo.db"

_TRUTHY = ("1", "true", "yes")


@dataclass
class Config:
    database_url: str = DEFAULT_DATABASE_URL
    echo: bool = False

    @classmethod
    def from_env(cls):
        """
        Build a configuration from the environment, reading ``.env`` first if present.
        """
        load_dotenv()

        return cls(
            database_url=os.getenv("QUERYDEMO_DATABASE_URL", DEFAULT_DATABASE_URL),
            echo=os.getenv("QUERYDEMO_ECHO", "").strip().lower() in _TRUTHY,
        )
