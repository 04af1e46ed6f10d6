import pytest

from blogcms import create_app
from blogcms.config import TestConfig
from blogcms.extensions import db
from blogcms.models import Post, User


ADMIN_EMAIL = TestConfig.ADMIN_EMAIL
ADMIN_PASSWORD = TestConfig.ADMIN_PASSWORD
USER_EMAIL = 'reader@example.com'
USER_PASSWORD = 'readerpass123'


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def regular_user(app):
    with app.app_context():
        u = User(email=USER_EMAIL, is_admin=False)
        u.set_password(USER_PASSWORD)
        db.session.add(u)
        db.session.commit()
        return u.id


def login(client, email, password, **extra):
    data = {'email': email, 'password': password}
    data.update(extra)
    return client.post('/login', data=data)


@pytest.fixture()
def admin_client(client):
    r = login(client, ADMIN_EMAIL, ADMIN_PASSWORD)
    assert r.status_code == 302
    return client


@pytest.fixture()
def user_client(client, regular_user):
    r = login(client, USER_EMAIL, USER_PASSWORD)
    assert r.status_code == 302
    return client


@pytest.fixture()
def make_post(app):
    def _make(slug, title=None, markdown='Body'):
        with app.app_context():
            db.session.add(Post(slug=slug, title=title or slug.title(), markdown=markdown))
            db.session.commit()
    return _make


def post_count(app):
    with app.app_context():
        return Post.query.count()
