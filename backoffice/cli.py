"""
Management Commands

    flask create-admin admin@example.com --name "Site Admin"
"""

import logging

import click
from flask.cli import with_appcontext
from sqlalchemy.exc import IntegrityError

from backoffice.extensions import db
from backoffice.models import Admin

logger = logging.getLogger(__name__)


@click.command('create-admin')
@click.argument('email')
@click.option('--name', default='', help='Display name for the admin.')
@click.password_option(help='Password for the new admin.')
@with_appcontext
def create_admin_command(email, name, password):
    """Create an administrator account."""
    email = email.strip()
    if Admin.query.filter_by(email=email).first():
        raise click.ClickException(f'An admin with email {email} already exists.')

    admin = Admin(email=email, name=name)
    admin.set_password(password)
    db.session.add(admin)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise click.ClickException(f'An admin with email {email} already exists.')

    logger.info('Created admin %s', email)
    click.echo(f'Created admin {email}')


def init_app(app):
    app.cli.add_command(create_admin_command)
