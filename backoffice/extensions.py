"""
Flask Extensions

Admin authentication is session-based and handled by the guard in
backoffice.auth, so the shared extensions are the database and CSRF
protection for the admin forms.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect

# Database instance
db = SQLAlchemy()

# CSRF tokens for every POST form
csrf = CSRFProtect()
