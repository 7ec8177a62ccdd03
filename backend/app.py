# backend/app.py
from flask import Flask, json
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from core.settings import load_settings, to_flask_config
from models import db
from routes import bp as api_bp


def handle_http_error(e):
    # keep werkzeug's headers (Allow on a 405) and swap the HTML body for JSON
    response = e.get_response()
    response.data = json.dumps({"error": e.description or e.name})
    response.content_type = "application/json"
    return response


def create_app(test_config=None):
    settings = load_settings()

    app = Flask(__name__)
    app.config.update(to_flask_config(settings))
    if test_config:
        app.config.update(test_config)

    app.json.sort_keys = app.config["JSON_SORT_KEYS"]

    db.init_app(app)

    # React front end runs on its own dev server
    CORS(app, resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}})

    app.register_blueprint(api_bp)
    app.register_error_handler(HTTPException, handle_http_error)

    if app.config.get("CREATE_TABLES"):
        with app.app_context():
            db.create_all()

    app.logger.info("[APP] using database %s", app.config["SQLALCHEMY_DATABASE_URI"])
    return app


if __name__ == "__main__":
    settings = load_settings()
    app = create_app()
    app.run(host=settings["host"], port=settings["port"], debug=settings["debug"])
