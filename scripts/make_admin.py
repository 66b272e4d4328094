"""Print a password hash for the ADMIN_PASSWORD_HASH environment variable."""
import getpass
import sys

from werkzeug.security import generate_password_hash

password = sys.argv[1] if len(sys.argv) > 1 else getpass.getpass('Admin password: ')
if not password:
    sys.exit('Password must not be empty')

print(generate_password_hash(password))
