"""
Admin Route Gate

Every request whose path falls under the admin prefix must carry an
authenticated admin session, except login and logout. The check runs as
an application-level hook so it also covers admin paths with no matching route.
"""

import logging

from flask import current_app, jsonify, redirect, request, url_for
from werkzeug.exceptions import Unauthorized

from backoffice.auth import get_admin_guard

logger = logging.getLogger(__name__)


class Unauthenticated(Unauthorized):
    """Raised when a gated admin path is requested without an admin session."""
    description = 'Unauthenticated.'


def is_gated_path(path, prefix):
    prefix = prefix.rstrip('/')
    if path != prefix and not path.startswith(prefix + '/'):
        return False
    return path not in (prefix + '/login', prefix + '/logout')


def require_admin_session():
    """before_request hook: stop the request unless an admin is logged in."""
    if not is_gated_path(request.path, current_app.config['ADMIN_URL_PREFIX']):
        return None
    if not get_admin_guard().is_authenticated():
        logger.debug('Denied unauthenticated %s %s', request.method, request.path)
        raise Unauthenticated()
    return None


def handle_unauthenticated(error):
    """Send browsers to the login page; JSON clients get a bare 401."""
    accept = request.accept_mimetypes
    if accept.accept_json and not accept.accept_html:
        return jsonify(message=error.description), 401
    return redirect(url_for('admin.login'))


def init_app(app):
    app.before_request(require_admin_session)
    app.register_error_handler(Unauthenticated, handle_unauthenticated)
