"""Access control on the admin routes."""
import pytest

from blogcms.extensions import db
from blogcms.models import User

from conftest import login, post_count


PROTECTED_GETS = ['/posts/admin', '/posts/admin/new', '/posts/admin/hello']

CREATE_FORM = {'title': 'Hello', 'slug': 'hello', 'markdown': 'Hi', 'intent': 'create'}


@pytest.mark.parametrize('path', PROTECTED_GETS)
def test_unauthenticated_redirects_to_login(client, path):
    r = client.get(path)
    assert r.status_code in (301, 302)
    assert '/login' in r.headers['Location']
    assert 'next=' in r.headers['Location']


@pytest.mark.parametrize('path', PROTECTED_GETS)
def test_regular_user_is_forbidden(user_client, path):
    r = user_client.get(path)
    assert r.status_code == 403


def test_admin_can_open_admin_pages(admin_client, make_post):
    make_post('hello')
    for path in PROTECTED_GETS:
        r = admin_client.get(path)
        assert r.status_code == 200, path


def test_mutations_without_admin_never_touch_store(app, client, regular_user, make_post, monkeypatch):
    calls = []
    for name in ('create_post', 'update_post', 'delete_post'):
        monkeypatch.setattr(f'blogcms.posts.routes.{name}',
                            lambda *a, _name=name, **kw: calls.append(_name))
    make_post('existing')

    # anonymous
    assert client.post('/posts/admin/new', data=CREATE_FORM).status_code == 302
    assert client.post('/posts/admin', data=CREATE_FORM).status_code == 302
    assert client.post('/posts/admin/existing', data={'intent': 'delete'}).status_code == 302

    # logged in but not an admin
    login(client, 'reader@example.com', 'readerpass123')
    assert client.post('/posts/admin/new', data=CREATE_FORM).status_code == 403
    assert client.post('/posts/admin/existing', data=dict(CREATE_FORM, intent='update')).status_code == 403
    assert client.post('/posts/admin/existing', data={'intent': 'delete'}).status_code == 403

    assert calls == []
    assert post_count(app) == 1


def test_forbidden_response_runs_before_validation(user_client):
    # an empty form would be a validation error for an admin
    r = user_client.post('/posts/admin/new', data={})
    assert r.status_code == 403
    assert 'Title is required' not in r.get_data(as_text=True)


def test_deleted_user_session_is_anonymous(app, user_client, regular_user):
    with app.app_context():
        db.session.delete(db.session.get(User, regular_user))
        db.session.commit()

    r = user_client.get('/posts/admin')
    assert r.status_code == 302
    assert '/login' in r.headers['Location']


def test_logout_revokes_admin_access(admin_client):
    assert admin_client.get('/posts/admin').status_code == 200
    admin_client.post('/logout')
    assert admin_client.get('/posts/admin').status_code == 302


def test_admin_link_only_for_admins(app, admin_client):
    anon = app.test_client()
    assert 'class="admin-link"' not in anon.get('/posts').get_data(as_text=True)
    assert 'class="admin-link"' in admin_client.get('/posts').get_data(as_text=True)
