from .base.session import SessionScope, build_engine
from .config import Config
from .demo import QueryDemo, QUERIES

__all__ = [
    "Config",
    "QueryDemo",
    "QUERIES",
    "SessionScope",
    "build_engine",
]

__version__ = '0.1.0'
