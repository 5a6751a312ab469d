from . import models  # noqa: F401
from .base import Base
from .session import create_engine, create_schema, create_session_factory

__all__ = ["Base", "create_engine", "create_schema", "create_session_factory"]
