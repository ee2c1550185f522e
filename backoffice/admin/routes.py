"""
Admin Routes

Pages behind the admin gate.
"""

from flask import render_template

from backoffice.admin import admin_bp
from backoffice.auth import get_admin_guard
from backoffice.models import Admin, User


@admin_bp.route('/dashboard')
def dashboard():
    """Admin dashboard with a short system overview."""
    admin = get_admin_guard().user()
    return render_template('admin/dashboard.html',
                           admin=admin,
                           total_users=User.query.count(),
                           total_admins=Admin.query.count())


@admin_bp.route('/users')
def users_index():
    """Read-only list of all users."""
    users = User.query.order_by(User.id).all()
    return render_template('admin/users/index.html', users=users)
