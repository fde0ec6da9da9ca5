import logging
from functools import wraps

import bcrypt
from flask import current_app, redirect, request, session, url_for

logger = logging.getLogger(__name__)


def is_authenticated(session_state) -> bool:
    return session_state.get('user_id') is not None


def login_required(f):
    """Run the view only for an authenticated session; otherwise redirect to the login page."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not is_authenticated(session):
            logger.info("Unauthenticated %s %s redirected to login", request.method, request.path)
            return redirect(url_for('auth.login'))
        return f(*args, **kwargs)
    return wrapper


# bcrypt only reads the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    encoded = password.encode('utf-8')
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValueError(f'Password cannot be longer than {MAX_PASSWORD_BYTES} bytes')
    rounds = current_app.config.get('BCRYPT_ROUNDS', 10)
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds)).decode('utf-8')


def check_password(password: str, password_hash: str) -> bool:
    encoded = password.encode('utf-8')
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(encoded, password_hash.encode('utf-8'))
