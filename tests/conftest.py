import pytest

from flatsite import create_app
from flatsite.config import TestConfig


@pytest.fixture()
def content_dir(tmp_path):
    return tmp_path / 'content'


@pytest.fixture()
def app(content_dir):
    class Config(TestConfig):
        CONTENT_DIR = str(content_dir)

    return create_app(Config)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_client(client):
    with client.session_transaction() as sess:
        sess['is_admin'] = True
    return client
