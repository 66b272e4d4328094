"""
Admin Routes

GET shows the login form or the editor depending on the session flag.
POST either attempts a login (`password`) or saves a page (`save`).
"""

from flask import render_template, request, redirect, url_for, flash, session
from flatsite.admin import admin_bp
from flatsite.extensions import get_store, get_gate
from flatsite.services import sanitize, DEFAULT_SLUG


@admin_bp.route('', methods=['GET', 'POST'])
def editor():
    """Admin login form and page editor."""
    gate = get_gate()

    if request.method == 'POST' and 'password' in request.form and not gate.is_authenticated():
        if gate.login(request.form.get('password', '')):
            session.permanent = True
            return redirect(url_for('admin.editor'))
        flash('Invalid password', 'danger')
        return render_template('admin/login.html')

    if not gate.is_authenticated():
        if request.method == 'POST':
            return render_template('admin/login.html'), 401
        return render_template('admin/login.html')

    if request.method == 'POST' and 'save' in request.form:
        slug = sanitize(request.form.get('slug', DEFAULT_SLUG))
        html = request.form.get('content', '')
        if get_store().write(slug, html):
            flash('Saved successfully.', 'success')
        else:
            flash('Failed to save. Check permissions.', 'danger')
        return redirect(url_for('admin.editor', p=slug))

    store = get_store()
    slug = sanitize(request.args.get('p', DEFAULT_SLUG))
    existing = store.get(slug) or ''

    return render_template('admin/editor.html',
                           slug=slug,
                           existing=existing,
                           slugs=store.list_slugs())
