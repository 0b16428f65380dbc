#!/usr/bin/env python3
"""
Auth Session State

Explicit state machine for whether this client holds a usable session.

The machine starts in CHECKING and only moves in response to the auth
service: a refresh, login, register or logout call. A successful response
stores the returned access token in the local store so that ledger requests
can send it as a bearer credential.
"""

import logging
from enum import Enum

import httpx

from ..core.store import LocalConfigStore

logger = logging.getLogger(__name__)

LOGIN_PATH = "/auth/login"
REGISTER_PATH = "/auth/register"
REFRESH_PATH = "/auth/refresh"
LOGOUT_PATH = "/auth/logout"

MIN_PASSWORD_LENGTH = 8

CREDENTIALS_REQUIRED = "Email and password are required"
PASSWORD_TOO_SHORT = "Password must be at least 8 characters"
PASSWORDS_DO_NOT_MATCH = "Passwords do not match"
LOGIN_FAILED = "Login failed"
NETWORK_ERROR = "Network error"


class AuthStatus(Enum):
    """Session states."""

    CHECKING = "checking"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


_ALLOWED_TRANSITIONS: dict[AuthStatus, set[AuthStatus]] = {
    AuthStatus.CHECKING: {AuthStatus.AUTHENTICATED, AuthStatus.UNAUTHENTICATED},
    AuthStatus.UNAUTHENTICATED: {AuthStatus.AUTHENTICATED, AuthStatus.UNAUTHENTICATED},
    AuthStatus.AUTHENTICATED: {AuthStatus.UNAUTHENTICATED},
}


def _error_message(response: httpx.Response) -> str:
    """Pull a readable message out of a failed auth response."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and isinstance(data.get("error"), str):
        return data["error"]
    return response.text or LOGIN_FAILED


class AuthSession:
    """
    Session state driven by auth service responses.

    Args:
        http: Shared async HTTP client (its cookie jar carries the refresh cookie)
        store: Local store holding the access token
    """

    def __init__(self, http: httpx.AsyncClient, store: LocalConfigStore):
        self.http = http
        self.store = store
        self.status = AuthStatus.CHECKING
        self.error: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.status == AuthStatus.AUTHENTICATED

    def _move(self, target: AuthStatus) -> None:
        if target not in _ALLOWED_TRANSITIONS[self.status]:
            raise ValueError(f"Invalid auth transition: {self.status.value} -> {target.value}")
        logger.debug("Auth status %s -> %s", self.status.value, target.value)
        self.status = target

    def _store_token(self, response: httpx.Response) -> None:
        try:
            data = response.json()
        except ValueError:
            return
        if isinstance(data, dict) and isinstance(data.get("access_token"), str):
            self.store.set_access_token(data["access_token"])

    async def check(self) -> AuthStatus:
        """
        Resolve the initial state by refreshing the session.

        A failed refresh still counts as authenticated when a non-empty token
        is already stored.
        """
        if self.status != AuthStatus.CHECKING:
            raise ValueError(f"Session already resolved as {self.status.value}")

        try:
            response = await self.http.post(REFRESH_PATH)
        except httpx.HTTPError as e:
            logger.info("Session refresh failed: %s", e)
            response = None

        if response is not None and response.is_success:
            self._store_token(response)
            self._move(AuthStatus.AUTHENTICATED)
        elif self.store.get_access_token():
            self._move(AuthStatus.AUTHENTICATED)
        else:
            self._move(AuthStatus.UNAUTHENTICATED)
        return self.status

    async def login(self, email: str, password: str) -> bool:
        """Sign in. Returns True on success; otherwise ``error`` says why."""
        return await self._authenticate(LOGIN_PATH, email, password, None)

    async def register(self, email: str, password: str, confirm_password: str) -> bool:
        """Create an account and sign in. Returns True on success."""
        return await self._authenticate(REGISTER_PATH, email, password, confirm_password)

    async def _authenticate(self, path: str, email: str, password: str, confirm: str | None) -> bool:
        if self.status == AuthStatus.AUTHENTICATED:
            raise ValueError("Already authenticated")

        if not email or not password:
            self.error = CREDENTIALS_REQUIRED
            return False
        if len(password) < MIN_PASSWORD_LENGTH:
            self.error = PASSWORD_TOO_SHORT
            return False
        if confirm is not None and password != confirm:
            self.error = PASSWORDS_DO_NOT_MATCH
            return False

        self.error = None
        body = {"email": email, "password": password}
        if confirm is not None:
            body["confirmPassword"] = confirm

        try:
            response = await self.http.post(path, json=body)
        except httpx.HTTPError as e:
            logger.warning("Auth request to %s failed: %s", path, e)
            self.error = NETWORK_ERROR
            self._move(AuthStatus.UNAUTHENTICATED)
            return False

        if not response.is_success:
            self.error = _error_message(response)
            self._move(AuthStatus.UNAUTHENTICATED)
            return False

        self._store_token(response)
        self._move(AuthStatus.AUTHENTICATED)
        logger.info("Signed in as %s", email)
        return True

    async def logout(self) -> None:
        """End the session. The remote call is best-effort; the token is always removed."""
        try:
            await self.http.post(LOGOUT_PATH)
        except httpx.HTTPError as e:
            logger.warning("Logout request failed: %s", e)

        self.store.clear_access_token()
        if self.status != AuthStatus.UNAUTHENTICATED:
            self._move(AuthStatus.UNAUTHENTICATED)
