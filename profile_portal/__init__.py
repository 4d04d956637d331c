from datetime import datetime, timezone, timedelta
import logging
import os
from flask import Flask, jsonify
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from profile_portal.database.db_manager import DBManager
from profile_portal.utils.error_messages import ERROR_MESSAGES
from profile_portal.utils.response import error_response
from profile_portal.utils.db_init import init_db

from profile_portal.database.token_blocklist import BLOCKLIST

from .routes.auth import auth_blueprint
from .routes.profile import profile_blueprint

def configure_logging(level_name):
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

def create_app(test_config=None):
    app = Flask(__name__)

    # --- Configuration ---
    app.config["JWT_SECRET_KEY"] = os.environ.get('JWT_SECRET_KEY', 'change-me-jwt-secret')
    app.config["SECRET_KEY"] = os.environ.get('SECRET_KEY', 'change-me-secret')
    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(hours=int(os.environ.get('JWT_ACCESS_TOKEN_HOURS', '1')))
    app.config["JWT_REFRESH_TOKEN_EXPIRES"] = timedelta(days=int(os.environ.get('JWT_REFRESH_TOKEN_DAYS', '30')))
    app.config["JWT_TOKEN_LOCATION"] = ["headers"]  # Authorization: Bearer <token>

    # --- Profile screen ---
    app.config["PROFILE_DEFAULT_BALANCE"] = int(os.environ.get('PROFILE_DEFAULT_BALANCE', '1500'))
    app.config["PROFILE_ROOT_PATH"] = os.environ.get('PROFILE_ROOT_PATH', '/')
    app.config["LOG_LEVEL"] = os.environ.get('LOG_LEVEL', 'INFO')

    if test_config:
        app.config.update(test_config)

    configure_logging(app.config["LOG_LEVEL"])

    if not app.config.get("TESTING"):
        with app.app_context():
            init_db()

    # --- CORS Configuration ---
    cors_origins = os.environ.get('CORS_ORIGINS', '*')
    CORS(app,
         resources={r"/api/*": {"origins": cors_origins}},
         supports_credentials=True,
         allow_headers=["Content-Type", "Authorization"],
         methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])

    jwt = JWTManager(app)

    # --- JWT Blocklist Configuration ---
    def check_if_token_in_blocklist(jwt_header, jwt_payload):
        """Tokens are revoked by sign-out."""
        return jwt_payload["jti"] in BLOCKLIST

    def revoked_token_callback(jwt_header, jwt_payload):
        return error_response(error_code='token_revoked', message=ERROR_MESSAGES["auth"]["token_revoked"], status=401)

    # --- JWT Custom Error Handlers ---
    def handle_invalid_token(error):
        return error_response(error_code='invalid_token', message=ERROR_MESSAGES["auth"]["invalid_token"], status=401)

    def handle_missing_token(error):
        return error_response(error_code='missing_token', message=ERROR_MESSAGES["auth"]["missing_token"], status=401)

    def handle_expired_token(jwt_header, jwt_payload):
        return error_response(error_code='token_expired', message=ERROR_MESSAGES["auth"]["token_expired"], status=401)

    jwt.token_in_blocklist_loader(check_if_token_in_blocklist)
    jwt.revoked_token_loader(revoked_token_callback)
    jwt.invalid_token_loader(handle_invalid_token)
    jwt.unauthorized_loader(handle_missing_token)
    jwt.expired_token_loader(handle_expired_token)

    # --- Register Blueprints ---
    app.register_blueprint(auth_blueprint, url_prefix='/api/auth')
    app.register_blueprint(profile_blueprint, url_prefix='/api')

    @app.route("/api/health")
    def health_check(): # type: ignore
        try:
            result = DBManager.execute_query("SELECT 1", fetch="one")
            if result is None:
                raise Exception("DB returned no result")
            db_status = "connected"
            http_status = 200
        except Exception as e:
            db_status = f"error: {str(e)}"
            http_status = 500

        return jsonify({
            "status": "running" if http_status == 200 else "error",
            "message": "Profile service is up and running!" if http_status == 200 else "Database connection failed",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": db_status
        }), http_status

    return app
