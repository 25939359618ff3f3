"""
db/errors.py
------------
Exceptions raised by the data access layer.
A missing row is never an error: lookups return None, listings return [].
"""


class PersistenceError(Exception):
    """A connection or statement failed; the driver error is the __cause__."""


class GeneratedKeyError(PersistenceError):
    """An insert ran but the store handed back no generated key."""
