"""
Admin Blueprint

Page editor guarded by the session gate. Login and editing share the
single /admin endpoint.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from flatsite.admin import routes  # noqa: E402, F401
