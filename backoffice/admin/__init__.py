"""
Admin Blueprint

Login, logout, dashboard and the user listing. Access control for the whole
prefix lives in backoffice.admin.gate, not on individual views.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from backoffice.admin import auth, routes  # noqa: E402, F401
