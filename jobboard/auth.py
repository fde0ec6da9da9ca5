import logging

from flask import Blueprint, current_app, flash, redirect, render_template, request, session, url_for

from jobboard.repositories import UserRepository
from jobboard.utils import check_password, hash_password

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)


def _users() -> UserRepository:
    return current_app.extensions['user_repository']


@auth_bp.get('/register')
def register():
    return render_template('register.html')


@auth_bp.post('/register')
def register_submit():
    try:
        username = (request.form.get('username') or '').strip()
        password = request.form.get('password') or ''
        if not username or not password:
            raise ValueError('Username and password are required')
        user_id = _users().create(username, hash_password(password))
        logger.info("Registered user %s (id=%s)", username, user_id)
        return redirect(url_for('auth.login'))
    except Exception:
        logger.exception("Error during registration")
        return render_template('register.html', error='Registration failed.')


@auth_bp.get('/login')
def login():
    return render_template('login.html')


@auth_bp.post('/login')
def login_submit():
    username = (request.form.get('username') or '').strip()
    password = request.form.get('password') or ''
    try:
        user = _users().get_by_username(username) if username else None
    except Exception:
        logger.exception("Error during login")
        return 'Error logging in', 500

    if not user or not check_password(password, user['password']):
        logger.info("Failed login for %r", username)
        flash('Invalid username or password.')
        return redirect(url_for('auth.login'))

    session.clear()
    session['user_id'] = user['id']
    session['username'] = user['username']
    logger.info("User %s logged in", user['username'])
    return redirect(url_for('index'))


@auth_bp.get('/logout')
def logout():
    username = session.get('username')
    session.clear()
    if username:
        logger.info("User %s logged out", username)
    return redirect(url_for('index'))
