"""Flask app serving the facet engine over JSON.

Run locally with ``python -m web.app``.
"""

from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

# Load environment variables from .env file (explicitly specify path)
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

from .api import api  # noqa: E402
from .config import FLASK_DEBUG, FLASK_HOST, FLASK_PORT  # noqa: E402

__all__ = ["create_app", "app"]


def create_app() -> Flask:
    """Create the Flask app with the API blueprint registered."""
    flask_app = Flask(__name__)
    flask_app.register_blueprint(api)
    return flask_app


app = create_app()


if __name__ == "__main__":
    app.run(host=FLASK_HOST, port=FLASK_PORT, debug=FLASK_DEBUG)
