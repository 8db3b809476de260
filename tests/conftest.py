"""Shared pytest fixtures and configuration."""

import pytest

from campusconnect.config import Settings, TokenConfig

# Minimum bcrypt cost, keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


@pytest.fixture
def token_config() -> TokenConfig:
    """Token configuration with a fixed test secret."""
    return TokenConfig(secret="test-secret")


@pytest.fixture
def settings(token_config: TokenConfig) -> Settings:
    """Settings for an in-memory database and fast hashing."""
    return Settings(
        token=token_config,
        db_path=":memory:",
        environment="production",
        bcrypt_rounds=TEST_BCRYPT_ROUNDS,
    )
