"""Credential Store - Persistent storage for student accounts."""

from campusconnect.credential_store.exceptions import (
    CredentialStoreError,
    StudentExistsError,
    StudentNotFoundError,
)
from campusconnect.credential_store.models import Student
from campusconnect.credential_store.store import CredentialStore

__all__ = [
    "CredentialStore",
    "CredentialStoreError",
    "Student",
    "StudentExistsError",
    "StudentNotFoundError",
]
