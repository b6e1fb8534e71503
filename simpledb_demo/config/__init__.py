from .config import SimpleDBConfig

__all__ = ["SimpleDBConfig"]
