"""Custom exceptions for the Credential Store."""


class CredentialStoreError(Exception):
    """Base exception for Credential Store errors."""


class StudentNotFoundError(CredentialStoreError):
    """Student with given ID does not exist."""


class StudentExistsError(CredentialStoreError):
    """Student with given email already exists."""
