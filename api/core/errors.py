"""
Storage failures, split by kind so callers can branch without parsing text.
"""

from __future__ import annotations


class StorageError(RuntimeError):
    pass


class NotFoundError(StorageError):
    pass


class ConflictError(StorageError):
    pass


class BackendError(StorageError):
    pass


class InvalidInputError(StorageError):
    pass
