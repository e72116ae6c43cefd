"""Domain models for gallery accounts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Public view of a registered account."""

    id: str
    email: str
    full_name: str
    join_date: int


@dataclass(frozen=True)
class StoredUser:
    """Registered account as kept by the credential store."""

    user: User
    password: str


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a login or signup attempt."""

    success: bool
    user: User | None = None
    message: str | None = None


def user_to_dict(user: User) -> dict[str, object]:
    """Serialize a user to its persisted JSON shape."""
    return {
        "id": user.id,
        "email": user.email,
        "fullName": user.full_name,
        "joinDate": user.join_date,
    }


def user_from_dict(row: dict[str, object]) -> User:
    """Parse a persisted user payload."""
    return User(
        id=str(row["id"]),
        email=str(row["email"]),
        full_name=str(row.get("fullName", "")),
        join_date=int(row["joinDate"]),
    )


def stored_user_to_dict(stored: StoredUser) -> dict[str, object]:
    """Serialize a registered account including its password."""
    return {**user_to_dict(stored.user), "password": stored.password}


def stored_user_from_dict(row: dict[str, object]) -> StoredUser:
    """Parse a registered account payload."""
    return StoredUser(user=user_from_dict(row), password=str(row["password"]))
