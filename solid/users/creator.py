"""User creation: persists users and nothing else."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str


class UserRepository(Protocol):
    def insert(self, attrs: Mapping[str, Any]) -> User:
        ...

    def get(self, user_id: int) -> Optional[User]:
        ...


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._ids = itertools.count(1)

    def insert(self, attrs: Mapping[str, Any]) -> User:
        user = User(id=next(self._ids), name=str(attrs["name"]), email=str(attrs["email"]))
        self._users[user.id] = user
        return user

    def get(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def __len__(self) -> int:
        return len(self._users)


def _require_str(attrs: Mapping[str, Any], k: str) -> str:
    v = attrs.get(k)
    if not isinstance(v, str) or not v.strip():
        raise ValueError(f"{k} must be non-empty string")
    return v


class UserCreator:
    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def create(self, attrs: Mapping[str, Any]) -> User:
        _require_str(attrs, "name")
        _require_str(attrs, "email")
        return self.repository.insert(attrs)
