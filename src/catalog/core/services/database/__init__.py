from .db_session import DbSessionService, register_sqlite_functions

__all__ = ["DbSessionService", "register_sqlite_functions"]
