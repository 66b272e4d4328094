"""
Flask Extensions

The page store is built once per app from config; the session gate is
built per request around that request's session.
"""

import os

from flask import current_app, session

from flatsite.services.content import FileContentStore, create_store
from flatsite.services.session_gate import SessionGate

EXTENSION_KEY = 'flatsite.pages'


class Pages:
    """Binds a ContentStore to a Flask app."""

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        store = create_store(app.config['CONTENT_BACKEND'], app.config.get('CONTENT_DIR'))
        if isinstance(store, FileContentStore):
            os.makedirs(store.root, exist_ok=True)
        app.extensions[EXTENSION_KEY] = store

    @property
    def store(self):
        return current_app.extensions[EXTENSION_KEY]


# Page storage for the current app
page_store = Pages()


def get_store():
    return page_store.store


def get_gate():
    """Session gate for the current request."""
    return SessionGate(session, current_app.config.get('ADMIN_PASSWORD_HASH'))
