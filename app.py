"""
Flat-file Site
Development server entry point.

Serves the pages in CONTENT_DIR and the /admin editor. Set SECRET_KEY and
ADMIN_PASSWORD_HASH (see scripts/make_admin.py) before exposing it.
"""

from flatsite import create_app

app = create_app()

if __name__ == '__main__':
    app.run(debug=True, host='127.0.0.1', port=5000)
