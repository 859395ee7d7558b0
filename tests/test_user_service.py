"""Tests for user service."""

from smoke_tracker.services.users import UserService
from tests.conftest import InMemoryUserRepository


def test_ensure_user_creates_user_once() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)

    first = service.ensure_user(123)
    second = service.ensure_user(123)

    assert first == second
    assert list(repository.users) == [123]
