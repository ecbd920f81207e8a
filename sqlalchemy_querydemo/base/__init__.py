from .session import SessionScope, build_engine

__all__ = [
    "SessionScope",
    "build_engine",
]
