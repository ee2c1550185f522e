import pytest
from flask import template_rendered

from backoffice import create_app
from backoffice.config import TestConfig
from backoffice.extensions import db
from backoffice.models import Admin


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        admin = Admin(name='Alice', email='a@x.com')
        admin.set_password('secret')
        db.session.add(admin)
        db.session.commit()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def login(client):
    def _login(email='a@x.com', password='secret', **kwargs):
        return client.post('/admin/login', data={'email': email, 'password': password}, **kwargs)
    return _login


@pytest.fixture()
def captured_templates(app):
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template, context))

    template_rendered.connect(record, app)
    yield recorded
    template_rendered.disconnect(record, app)
