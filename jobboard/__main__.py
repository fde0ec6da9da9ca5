from dotenv import load_dotenv

from jobboard.app import create_app
from jobboard.config import get_settings


def main():
    load_dotenv()
    settings = get_settings()
    app = create_app(settings)
    database = app.extensions['db']
    database.init_schema()
    try:
        app.run(host='0.0.0.0', port=settings.port, debug=settings.flask_debug)
    finally:
        database.dispose()


if __name__ == '__main__':
    main()
