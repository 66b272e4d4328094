"""
Flat-file Site - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import secrets
from datetime import date

from flask import Flask
from flatsite.extensions import page_store, get_gate
from flatsite.config import Config


DEFAULT_PAGES = {
    'home': (
        '<h1>Welcome</h1>\n'
        '<p>This is the home page. Edit this content from '
        '<a href="/admin?p=home">Admin &rarr; home</a>.</p>\n'
    ),
    'about': (
        '<h1>About</h1>\n'
        '<p>Write something about your site here.</p>\n'
    ),
    'contact': (
        '<h1>Contact</h1>\n'
        '<p>You can add contact details or a contact form here.</p>\n'
    ),
}


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    if not app.config.get('SECRET_KEY'):
        app.config['SECRET_KEY'] = secrets.token_hex(32)
        app.logger.warning('No SECRET_KEY set; using a random key, admin sessions end on restart')

    # Initialize extensions
    page_store.init_app(app)

    # Register blueprints
    from flatsite.pages import pages_bp
    from flatsite.admin import admin_bp

    app.register_blueprint(pages_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')

    # Context processor for the shared header/footer
    @app.context_processor
    def inject_site_chrome():
        """Inject `is_admin` flag and site navigation into templates."""
        return dict(
            is_admin=get_gate().is_authenticated(),
            site_name=app.config['SITE_NAME'],
            nav_pages=app.config['NAV_PAGES'],
            current_year=date.today().year,
        )

    if not app.config.get('ADMIN_PASSWORD_HASH'):
        app.logger.warning('No ADMIN_PASSWORD_HASH or ADMIN_PASSWORD set; admin login is disabled')

    if app.config['SEED_DEFAULT_PAGES']:
        with app.app_context():
            _ensure_default_pages(app)

    return app


def _ensure_default_pages(app):
    """Seed the starter pages when the site has none of them."""
    store = page_store.store
    if any(store.exists(slug) for slug in DEFAULT_PAGES):
        return

    for slug, html in DEFAULT_PAGES.items():
        if store.write(slug, html):
            app.logger.info('Created default page %s', slug)
        else:
            app.logger.warning('Could not create default page %s in %r', slug, store)
