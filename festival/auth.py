"""Admin sign-in and session checks.

A session is a plain value; whether it is valid is a pure function of the
session and the current time. Where sessions are kept is up to the caller,
via a SessionStore.
"""

import secrets
from abc import ABC, abstractmethod
from datetime import datetime, timedelta

from loguru import logger

from festival.config import FestivalSettings
from festival.models import Session


class AuthError(Exception):
    """Raised when credentials are wrong or a session does not grant access."""
    pass


def verify_credentials(username: str, password: str, settings: FestivalSettings) -> bool:
    """Check a username/password pair against the configured admin account."""
    if not settings.admin_password:
        return False
    username_ok = secrets.compare_digest(username.encode(), settings.admin_username.encode())
    password_ok = secrets.compare_digest(password.encode(), settings.admin_password.encode())
    return username_ok and password_ok


def _require_aware(value: datetime, name: str) -> None:
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be a timezone-aware datetime, got {value!r}")


def issue_session(email: str, now: datetime, ttl: timedelta) -> Session:
    """Create an admin session valid from ``now`` for ``ttl``.

    Raises:
        ValueError: If ``now`` is a naive datetime
    """
    _require_aware(now, "now")
    return Session(email=email, issued_at=now, expires_at=now + ttl, is_admin=True)


def is_session_active(session: Session | None, now: datetime) -> bool:
    """Whether ``session`` grants admin access at ``now``.

    The window is half-open: valid from issued_at up to, but not
    including, expires_at. All times must be timezone-aware.

    Raises:
        ValueError: If ``now`` or either session time is a naive datetime
    """
    _require_aware(now, "now")
    if session is None or not session.is_admin:
        return False
    _require_aware(session.issued_at, "issued_at")
    _require_aware(session.expires_at, "expires_at")
    return session.issued_at <= now < session.expires_at


def require_admin(session: Session | None, now: datetime) -> Session:
    """Return the session if it grants admin access at ``now``.

    Raises:
        AuthError: If there is no session, it is not an admin session, or it
            has expired
    """
    if session is None:
        raise AuthError("Not signed in.")
    if not session.is_admin:
        raise AuthError("This account does not have admin access.")
    if not is_session_active(session, now):
        raise AuthError("Your session has expired. Please sign in again.")
    return session


class SessionStore(ABC):
    """Somewhere to keep the current admin session between requests."""

    @abstractmethod
    def load(self) -> Session | None:
        pass

    @abstractmethod
    def save(self, session: Session) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass


class MemorySessionStore(SessionStore):
    """Session store that keeps the session in memory, for one process."""

    def __init__(self) -> None:
        self._session: Session | None = None

    def load(self) -> Session | None:
        return self._session

    def save(self, session: Session) -> None:
        self._session = session

    def clear(self) -> None:
        self._session = None


def sign_in(
    store: SessionStore,
    username: str,
    password: str,
    now: datetime,
    settings: FestivalSettings,
) -> Session:
    """Verify credentials, then issue and store a new admin session.

    Raises:
        AuthError: If the credentials are not the configured admin account
    """
    if not verify_credentials(username, password, settings):
        logger.warning(f"Rejected admin sign-in for {username!r}")
        raise AuthError("Invalid credentials. Only authorized officials can access this system.")

    session = issue_session(
        settings.admin_email, now, timedelta(hours=settings.session_ttl_hours)
    )
    store.save(session)
    logger.info(f"Admin session issued to {session.email}, expires {session.expires_at.isoformat()}")
    return session


def sign_out(store: SessionStore) -> None:
    store.clear()


def current_session(store: SessionStore, now: datetime) -> Session | None:
    """Return the stored session if still active; an expired one is cleared."""
    session = store.load()
    if session is None:
        return None
    if not is_session_active(session, now):
        logger.info(f"Clearing expired admin session for {session.email}")
        store.clear()
        return None
    return session
