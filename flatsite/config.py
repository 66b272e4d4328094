"""
Configuration settings for the flat-file site
"""
import os

from werkzeug.security import generate_password_hash


def _admin_password_hash():
    """Admin credential from the environment, as a salted hash.

    ADMIN_PASSWORD_HASH wins; a plain ADMIN_PASSWORD is hashed on load.
    Returns None when neither is set, which disables admin login.
    """
    stored = os.environ.get('ADMIN_PASSWORD_HASH')
    if stored:
        return stored
    plain = os.environ.get('ADMIN_PASSWORD')
    if plain:
        return generate_password_hash(plain)
    return None


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions; a random per-process key is used when unset
    SECRET_KEY = os.environ.get('SECRET_KEY')

    # Admin session lifetime in seconds
    PERMANENT_SESSION_LIFETIME = int(os.environ.get('PERMANENT_SESSION_LIFETIME') or 3600)

    # Page storage
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    CONTENT_BACKEND = os.environ.get('FLATSITE_CONTENT_BACKEND') or 'file'
    CONTENT_DIR = os.environ.get('FLATSITE_CONTENT_DIR') or os.path.join(basedir, 'content')
    SEED_DEFAULT_PAGES = True

    # Site chrome
    SITE_NAME = os.environ.get('SITE_NAME') or 'My Flexible Site'
    NAV_PAGES = ['home', 'about', 'contact']

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Admin credential (hash only, never a literal password)
    ADMIN_PASSWORD_HASH = _admin_password_hash()


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    CONTENT_BACKEND = 'file'
    CONTENT_DIR = None
    SEED_DEFAULT_PAGES = False
    LOG_LEVEL = 'DEBUG'
    TEST_ADMIN_PASSWORD = 'correct-horse-battery'
    ADMIN_PASSWORD_HASH = generate_password_hash(TEST_ADMIN_PASSWORD)
