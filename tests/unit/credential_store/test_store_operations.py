"""Unit tests for CredentialStore operations."""

import pytest

from campusconnect.credential_store import (
    CredentialStore,
    StudentExistsError,
    StudentNotFoundError,
)


@pytest.fixture
def store():
    """Create an in-memory CredentialStore for testing."""
    s = CredentialStore(":memory:")
    yield s
    s.close()


def _create(store: CredentialStore, email: str = "ada@example.edu", name: str = "Ada Lovelace"):
    return store.create(name=name, email=email, course="Mathematics", password_hash="hash")


@pytest.mark.unit
class TestCreate:
    """Tests for create."""

    def test_create_student(self, store: CredentialStore) -> None:
        """Create assigns an id and timestamps."""
        student = _create(store)

        assert student.id is not None
        assert student.name == "Ada Lovelace"
        assert student.email == "ada@example.edu"
        assert student.course == "Mathematics"
        assert student.password_hash == "hash"
        assert student.created_at is not None
        assert student.updated_at is not None

    def test_create_duplicate_email_raises(self, store: CredentialStore) -> None:
        """StudentExistsError on duplicate email."""
        _create(store)

        with pytest.raises(StudentExistsError) as exc_info:
            _create(store, name="Someone Else")

        assert "ada@example.edu" in str(exc_info.value)
        assert store.count_by_email("ada@example.edu") == 1

    def test_email_uniqueness_is_case_sensitive(self, store: CredentialStore) -> None:
        """Emails are stored exactly as given."""
        _create(store)
        _create(store, email="ADA@example.edu")

        assert store.count_by_email("ada@example.edu") == 1
        assert store.count_by_email("ADA@example.edu") == 1


@pytest.mark.unit
class TestFind:
    """Tests for find_by_email and find_by_id."""

    def test_find_by_email(self, store: CredentialStore) -> None:
        """Returns the matching student."""
        created = _create(store)

        found = store.find_by_email("ada@example.edu")

        assert found is not None
        assert found.id == created.id

    def test_find_by_email_missing(self, store: CredentialStore) -> None:
        """Returns None for unknown email."""
        assert store.find_by_email("nobody@example.edu") is None

    def test_find_by_id(self, store: CredentialStore) -> None:
        """Returns the matching student."""
        created = _create(store)

        found = store.find_by_id(created.id)

        assert found is not None
        assert found.email == "ada@example.edu"

    def test_find_by_id_missing(self, store: CredentialStore) -> None:
        """Returns None for unknown id."""
        assert store.find_by_id("nonexistent-id") is None

    def test_count_by_email_missing(self, store: CredentialStore) -> None:
        """Zero for unknown email."""
        assert store.count_by_email("nobody@example.edu") == 0


@pytest.mark.unit
class TestUpdateById:
    """Tests for update_by_id."""

    def test_update_name_and_course(self, store: CredentialStore) -> None:
        """Both fields change, id and email do not."""
        created = _create(store)

        updated = store.update_by_id(created.id, name="Jane Doe", course="Physics")

        assert updated.id == created.id
        assert updated.email == "ada@example.edu"
        assert updated.name == "Jane Doe"
        assert updated.course == "Physics"

        reloaded = store.find_by_id(created.id)
        assert reloaded is not None
        assert reloaded.name == "Jane Doe"
        assert reloaded.course == "Physics"

    def test_update_partial(self, store: CredentialStore) -> None:
        """Only provided fields are updated."""
        created = _create(store)

        updated = store.update_by_id(created.id, course="Physics")

        assert updated.name == "Ada Lovelace"
        assert updated.course == "Physics"

    def test_update_keeps_password_hash(self, store: CredentialStore) -> None:
        """Profile updates never touch the password hash."""
        created = _create(store)

        updated = store.update_by_id(created.id, name="New Name")

        assert updated.password_hash == "hash"

    def test_update_missing_raises(self, store: CredentialStore) -> None:
        """StudentNotFoundError for unknown id."""
        with pytest.raises(StudentNotFoundError):
            store.update_by_id("nonexistent-id", name="X")


@pytest.mark.unit
class TestPing:
    """Tests for ping."""

    def test_ping(self, store: CredentialStore) -> None:
        """An open store answers queries."""
        assert store.ping() is True
