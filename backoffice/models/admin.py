"""
Admin Model

Administrator identities for the admin realm. Rows are provisioned with the
`flask create-admin` command and only read by the login flow.
"""

from datetime import datetime

from werkzeug.security import generate_password_hash, check_password_hash

from backoffice.extensions import db


class Admin(db.Model):
    """Administrator account used by the admin session guard"""
    __tablename__ = 'admins'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False, default='')
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password, method='pbkdf2:sha256')

    def check_password(self, password):
        """Compare `password` with the stored hash in constant time."""
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<Admin {self.email}>'
