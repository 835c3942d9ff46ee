from __future__ import annotations


class DomainError(Exception):
    pass


class InvalidRequestBodyError(DomainError):
    pass


class ContactStorageError(DomainError):
    pass
