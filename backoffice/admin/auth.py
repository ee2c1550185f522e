"""
Admin Auth Routes

Login form, login submit and logout for the admin realm.
"""

from flask import render_template, request, redirect, url_for, flash, session

from backoffice.admin import admin_bp
from backoffice.auth import get_admin_guard

# Same message whatever went wrong, so the form never reveals which emails exist
INVALID_CREDENTIALS = 'Invalid Credentials'


@admin_bp.route('/login', methods=['GET'])
def login():
    """Show the admin login form."""
    return render_template('admin/auth/login.html', errors={}, email='')


@admin_bp.route('/login', methods=['POST'])
def login_post():
    """Check the submitted credentials and start an admin session."""
    email = request.form.get('email', '').strip()
    password = request.form.get('password', '')

    if get_admin_guard().attempt(email, password):
        # Expiry follows PERMANENT_SESSION_LIFETIME
        session.permanent = True
        return redirect(url_for('admin.dashboard'))

    # Re-render in place; the password is never sent back
    return render_template('admin/auth/login.html',
                           errors={'email': INVALID_CREDENTIALS},
                           email=email)


@admin_bp.route('/logout', methods=['POST'])
def logout():
    """End the admin session."""
    get_admin_guard().logout()
    flash('You have been logged out of the admin panel.', 'info')
    return redirect(url_for('admin.login'))
