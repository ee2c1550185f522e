"""
Admin Authentication

The admin realm is session-based. Each request gets its own SessionGuard,
built around the request's session and cached on ``flask.g``.
"""

from flask import g, session

from backoffice.auth.guard import SessionGuard
from backoffice.auth.store import AdminCredentialStore

__all__ = ['SessionGuard', 'AdminCredentialStore', 'get_admin_guard']


def get_admin_guard():
    """Return the admin guard for the current request."""
    guard = g.get('admin_guard')
    if guard is None:
        guard = SessionGuard(session, AdminCredentialStore(), realm='admin')
        g.admin_guard = guard
    return guard
