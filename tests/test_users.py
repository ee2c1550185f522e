from backoffice.extensions import db
from backoffice.models import User


def add_users(app, *people):
    with app.app_context():
        for name, email in people:
            db.session.add(User(name=name, email=email))
        db.session.commit()


def test_users_index_lists_every_user(app, client, login):
    add_users(app, ('Bob', 'bob@example.com'), ('Carol', 'carol@example.com'))
    login()
    r = client.get('/admin/users')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Users List' in body
    assert 'bob@example.com' in body
    assert 'carol@example.com' in body
    assert body.index('Bob') < body.index('Carol')


def test_users_index_passes_users_in_id_order(app, client, login, captured_templates):
    add_users(app, ('Zed', 'zed@example.com'), ('Amy', 'amy@example.com'))
    login()
    client.get('/admin/users')
    template, context = captured_templates[-1]
    assert template.name == 'admin/users/index.html'
    assert [u.name for u in context['users']] == ['Zed', 'Amy']


def test_users_index_with_no_users(client, login):
    login()
    r = client.get('/admin/users')
    assert r.status_code == 200
    assert '<td>' not in r.get_data(as_text=True)


def test_dashboard_shows_counts(app, client, login, captured_templates):
    add_users(app, ('Bob', 'bob@example.com'))
    login()
    client.get('/admin/dashboard')
    _, context = captured_templates[-1]
    assert context['total_users'] == 1
    assert context['total_admins'] == 1
    assert context['admin'].email == 'a@x.com'


def test_welcome_page(client):
    r = client.get('/')
    assert r.status_code == 200
    assert 'Welcome' in r.get_data(as_text=True)
