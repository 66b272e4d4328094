"""
Page Routes
"""

from flask import render_template, request, redirect, url_for
from flatsite.pages import pages_bp
from flatsite.extensions import get_store, get_gate
from flatsite.services import sanitize, DEFAULT_SLUG


@pages_bp.route('/')
def show_page():
    """Render `?p=<slug>`, or handle `?logout=1`."""
    if 'logout' in request.args:
        get_gate().logout()
        return redirect(url_for('pages.show_page'))

    slug = sanitize(request.args.get('p', DEFAULT_SLUG))
    content = get_store().read(slug)

    return render_template('page.html',
                           title=slug.capitalize(),
                           slug=slug,
                           content=content)
