import logging

from flask import Flask, jsonify, render_template, session

from jobboard import __version__
from jobboard.auth import auth_bp
from jobboard.config import Settings, get_settings
from jobboard.db import Database
from jobboard.jobs import jobs_bp
from jobboard.logging_setup import setup_logging
from jobboard.repositories import JobRepository, UserRepository

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> Flask:
    """Build the Flask application.

    The database handle is created here once and shared by both repositories;
    pass ``database`` to reuse an existing pool, e.g. in tests.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = Flask(__name__)
    app.config['SECRET_KEY'] = settings.secret_key
    app.config['BCRYPT_ROUNDS'] = settings.bcrypt_rounds
    app.url_map.strict_slashes = False

    if database is None:
        database = Database(settings.sqlalchemy_url())
    app.extensions['db'] = database
    app.extensions['job_repository'] = JobRepository(database)
    app.extensions['user_repository'] = UserRepository(database)

    app.register_blueprint(auth_bp)
    app.register_blueprint(jobs_bp)

    @app.context_processor
    def inject_user():
        return {'current_username': session.get('username'), 'app_name': settings.app_name}

    @app.route('/', methods=['GET'])
    def index():
        return render_template('index.html')

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({"status": "ok", "message": "Job board is running", "version": __version__})

    @app.errorhandler(500)
    def internal_error(e):
        logger.error("Unhandled error", exc_info=getattr(e, 'original_exception', e))
        return 'Internal server error', 500

    @app.cli.command('init-db')
    def init_db_command():
        """Create the jobs and users tables."""
        database.init_schema()
        print("Initialized the database.")

    logger.info("%s v%s configured", settings.app_name, __version__)
    return app
