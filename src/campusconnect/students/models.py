"""Result types and name helpers for the Student Service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from campusconnect.credential_store import Student


@dataclass(frozen=True)
class AuthResult:
    """Token plus the account it was issued for."""

    token: str
    student: Student


@dataclass(frozen=True)
class ProfileView:
    """Profile shape derived from a stored Student."""

    first_name: str
    last_name: str
    email: str
    department: str

    @classmethod
    def from_student(cls, student: Student) -> ProfileView:
        first_name, last_name = split_name(student.name)
        return cls(
            first_name=first_name,
            last_name=last_name,
            email=student.email,
            department=student.course,
        )


def split_name(name: str) -> tuple[str, str]:
    """Split a display name at its first space.

    >>> split_name("Ada King Lovelace")
    ('Ada', 'King Lovelace')
    >>> split_name("Plato")
    ('Plato', '')
    """
    first_name, _, last_name = name.partition(" ")
    return first_name, last_name


def join_name(first_name: str, last_name: str) -> str:
    """Join first and last name with one space, trimming the ends.

    >>> join_name("Jane", "")
    'Jane'
    """
    return f"{first_name} {last_name}".strip()
