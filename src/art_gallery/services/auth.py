"""Credential store for gallery accounts and the current session.

Passwords are stored and compared in plaintext.
"""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime

from art_gallery.domain.users import (
    AuthResult,
    StoredUser,
    User,
    stored_user_from_dict,
    stored_user_to_dict,
    user_from_dict,
    user_to_dict,
)
from art_gallery.services.ids import TimestampIdGenerator
from art_gallery.services.storage import (
    CURRENT_USER_KEY,
    USERS_KEY,
    JsonKeyValueStore,
)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
EMAIL_EXISTS_MESSAGE = "Email already exists"

_logger = logging.getLogger(__name__)


@dataclass
class AuthService:
    """Signup, login and logout against locally stored accounts."""

    store: JsonKeyValueStore
    ids: TimestampIdGenerator = field(default_factory=TimestampIdGenerator)

    def get_current_user(self) -> User | None:
        """Return the user of the current session, if any."""
        raw = self.store.get(CURRENT_USER_KEY, None)
        if not isinstance(raw, dict):
            return None
        try:
            return user_from_dict(raw)
        except (KeyError, TypeError, ValueError):
            _logger.warning("Ignoring malformed current session")
            return None

    def is_authenticated(self) -> bool:
        """Return True when a session is active."""
        return self.get_current_user() is not None

    def login(self, email: str, password: str) -> AuthResult:
        """Start a session for matching credentials."""
        for stored in self._load_users():
            if stored.user.email == email and stored.password == password:
                self.store.set(CURRENT_USER_KEY, user_to_dict(stored.user))
                return AuthResult(success=True, user=stored.user)
        return AuthResult(success=False, message=INVALID_CREDENTIALS_MESSAGE)

    def signup(self, email: str, password: str, full_name: str) -> AuthResult:
        """Register a new account and start a session for it."""
        rows = self._load_user_rows()
        if any(isinstance(row, dict) and row.get("email") == email for row in rows):
            return AuthResult(success=False, message=EMAIL_EXISTS_MESSAGE)

        user = User(
            id=self.ids.next_id(),
            email=email,
            full_name=full_name,
            join_date=datetime.now(tz=UTC).year,
        )
        rows.append(stored_user_to_dict(StoredUser(user=user, password=password)))
        self.store.set(USERS_KEY, rows)
        self.store.set(CURRENT_USER_KEY, user_to_dict(user))
        _logger.info("Registered user id=%s", user.id)
        return AuthResult(success=True, user=user)

    def logout(self) -> None:
        """End the current session; registered accounts are kept."""
        self.store.remove(CURRENT_USER_KEY)

    def _load_user_rows(self) -> list[object]:
        """Return stored account rows as persisted, parsed or not."""
        rows = self.store.get(USERS_KEY, [])
        return rows if isinstance(rows, list) else []

    def _load_users(self) -> list[StoredUser]:
        """Return registered accounts, skipping malformed rows."""
        users: list[StoredUser] = []
        for row in self._load_user_rows():
            try:
                users.append(stored_user_from_dict(row))
            except (KeyError, TypeError, ValueError):
                _logger.warning("Skipping malformed stored user")
        return users
