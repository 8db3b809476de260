"""CredentialStore - persistence for student accounts."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from campusconnect.credential_store.database import Database
from campusconnect.credential_store.exceptions import (
    StudentExistsError,
    StudentNotFoundError,
)
from campusconnect.credential_store.models import Student

logger = logging.getLogger(__name__)


class CredentialStore:
    """CRUD operations for Student records.

    Each operation opens its own session, so a single store can be shared by
    concurrent requests.
    """

    def __init__(self, db_path: str = "campusconnect.db") -> None:
        """Initialize the store with a SQLite database.

        Creates database and tables if they don't exist.

        Args:
            db_path: Path to SQLite database file
        """
        self._db = Database(db_path)
        self._db.create_tables()

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    def ping(self) -> bool:
        """Check whether the database answers queries.

        Returns:
            True if reachable, False otherwise.
        """
        try:
            return self._db.ping()
        except SQLAlchemyError:
            logger.warning("Database ping failed", exc_info=True)
            return False

    def find_by_email(self, email: str) -> Student | None:
        """Look up a student by email address.

        Args:
            email: The login email

        Returns:
            The Student, or None if no account uses this email
        """
        session = self._db.get_session()
        try:
            stmt = select(Student).where(Student.email == email)
            return session.execute(stmt).scalar_one_or_none()
        finally:
            session.close()

    def find_by_id(self, student_id: str) -> Student | None:
        """Look up a student by ID.

        Args:
            student_id: The student's unique ID

        Returns:
            The Student, or None if it doesn't exist
        """
        session = self._db.get_session()
        try:
            return session.get(Student, student_id)
        finally:
            session.close()

    def count_by_email(self, email: str) -> int:
        """Count the records registered under an email."""
        session = self._db.get_session()
        try:
            stmt = select(func.count(Student.id)).where(Student.email == email)
            return session.execute(stmt).scalar_one()
        finally:
            session.close()

    def create(self, name: str, email: str, course: str, password_hash: str) -> Student:
        """Create a new student.

        Args:
            name: Display name
            email: Login email, unique across students
            course: Course or department
            password_hash: Already-hashed password

        Returns:
            Created Student object with generated ID

        Raises:
            StudentExistsError: If a student with the same email already exists
        """
        session = self._db.get_session()
        try:
            student = Student(
                name=name,
                email=email,
                course=course,
                password_hash=password_hash,
            )
            session.add(student)
            session.commit()
            session.refresh(student)
            return student
        except IntegrityError as e:
            session.rollback()
            if "UNIQUE constraint failed" in str(e) or "students.email" in str(e):
                raise StudentExistsError(f"Student with email '{email}' already exists") from e
            raise
        finally:
            session.close()

    def update_by_id(
        self,
        student_id: str,
        name: str | None = None,
        course: str | None = None,
    ) -> Student:
        """Update student fields. Only provided fields are updated.

        Args:
            student_id: The student's unique ID
            name: New display name (optional)
            course: New course (optional)

        Returns:
            The updated Student object

        Raises:
            StudentNotFoundError: If student doesn't exist
        """
        session = self._db.get_session()
        try:
            student = session.get(Student, student_id)
            if student is None:
                raise StudentNotFoundError(f"Student with id '{student_id}' not found")

            if name is not None:
                student.name = name
            if course is not None:
                student.course = course

            session.commit()
            session.refresh(student)
            return student
        finally:
            session.close()
