"""
Admin Credential Store

Read-only lookups of administrator identities backed by the `admins` table.
"""

from backoffice.extensions import db
from backoffice.models import Admin


class AdminCredentialStore:
    """Resolve and verify Admin records for the session guard."""

    def retrieve_by_id(self, admin_id):
        return db.session.get(Admin, admin_id)

    def retrieve_by_email(self, email):
        return Admin.query.filter_by(email=email).first()

    def validate(self, admin, password):
        return admin.check_password(password)
