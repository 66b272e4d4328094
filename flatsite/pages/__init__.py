"""
Pages Blueprint

Public router: renders stored pages inside the shared site layout.
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__)

from flatsite.pages import routes  # noqa: E402, F401
