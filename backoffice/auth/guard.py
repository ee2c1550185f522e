"""
Session Guard

Mediates login, logout and authentication checks for one realm. A guard wraps
an explicit session mapping and a credential store, so it can be built per
request instead of living in a process-wide singleton.
"""

import logging

logger = logging.getLogger(__name__)


class SessionGuard:
    """Authenticate against a credential store and bind the result to a session.

    Args:
        session: Mutable mapping holding the request's session state
            (normally ``flask.session``).
        store: Object providing ``retrieve_by_id``, ``retrieve_by_email`` and
            ``validate(identity, password)``.
        realm: Name of the authentication realm. The bound identity id is kept
            under ``_<realm>_id`` so realms never share state.
    """

    def __init__(self, session, store, realm='admin'):
        self.session = session
        self.store = store
        self.realm = realm
        self._user = None
        self._resolved = False

    @property
    def session_key(self):
        return f'_{self.realm}_id'

    def attempt(self, email, password):
        """Try to log in with `email` and `password`.

        Returns True and binds the session on success. Unknown emails and wrong
        passwords both return False without touching the session.
        """
        if not email or not password:
            return False

        identity = self.store.retrieve_by_email(email)
        if identity is None or not self.store.validate(identity, password):
            logger.info('Failed %s login attempt for %s', self.realm, email)
            return False

        self._login(identity)
        logger.info('%s %s logged in', self.realm.capitalize(), email)
        return True

    def _login(self, identity):
        # Drop whatever the session carried before authentication
        self.session.clear()
        self.session[self.session_key] = identity.id
        self._user = identity
        self._resolved = True

    def user(self):
        """Return the identity bound to the session, or None."""
        if not self._resolved:
            identity_id = self.session.get(self.session_key)
            if identity_id is not None:
                self._user = self.store.retrieve_by_id(identity_id)
                if self._user is None:
                    logger.debug('Dropping stale %s session for id %s', self.realm, identity_id)
                    self.session.pop(self.session_key, None)
            self._resolved = True
        return self._user

    def is_authenticated(self):
        return self.user() is not None

    def logout(self):
        """Unbind the session's identity. Safe to call when not logged in."""
        identity = self.user()
        self.session.pop(self.session_key, None)
        self._user = None
        self._resolved = True
        if identity is not None:
            logger.info('%s %s logged out', self.realm.capitalize(), identity.email)
