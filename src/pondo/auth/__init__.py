"""
Auth Package

Session state for the ledger's auth service. Kept apart from the ledger core:
views only see the access token it leaves in the local store.
"""

from .session import AuthSession, AuthStatus

__all__ = ["AuthSession", "AuthStatus"]
