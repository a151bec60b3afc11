"""Test configuration and helpers."""

from uuid import uuid4

from threadtree.domain.model import User
from threadtree.domain.value import UserId, Username
from threadtree.persistence.repository.inmemory import InMemoryStore


def make_user(
    username: str = "alice",
    name: str | None = None,
    image: str | None = None,
) -> User:
    """Build a user with a fresh id."""
    return User(
        id=UserId(uuid4()),
        name=name or username.capitalize(),
        username=Username(root=username),
        image=image,
    )


def seed_user(store: InMemoryStore, username: str = "alice", **kwargs) -> User:
    """Put a new user straight into the in-memory store."""
    user = make_user(username, **kwargs)
    store.put_user(user)
    return user
