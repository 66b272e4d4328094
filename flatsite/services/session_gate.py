"""
Session Gate

Admin authentication is a single flag in the session, guarded by one
shared secret. The secret is only ever held as a salted hash.
"""

import logging

from werkzeug.security import check_password_hash

logger = logging.getLogger(__name__)

SESSION_FLAG = 'is_admin'


class SessionGate:
    """Login/logout transitions over an explicit session mapping.

    Args:
        session: the per-request session (Flask's `session`, or any dict)
        password_hash: werkzeug hash of the admin password, or None to
            disable admin login entirely
    """

    def __init__(self, session, password_hash):
        self.session = session
        self.password_hash = password_hash

    def login(self, password):
        if not self.password_hash or not password:
            logger.warning('Rejected admin login attempt')
            return False
        if not check_password_hash(self.password_hash, password):
            logger.warning('Rejected admin login attempt')
            return False
        self.session.clear()
        self.session[SESSION_FLAG] = True
        logger.info('Admin logged in')
        return True

    def logout(self):
        self.session.pop(SESSION_FLAG, None)

    def is_authenticated(self):
        return self.session.get(SESSION_FLAG) is True
