"""
db/errors.py
------------
Store-level exceptions shared by the data source and the repositories.
"""


class DataAccessError(RuntimeError):
    """A store operation failed (SQL error, lost session, ...)."""


class DatabaseConnectionError(DataAccessError):
    """The driver could not establish a session with the store."""
