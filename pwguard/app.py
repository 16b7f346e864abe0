import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from pwguard.config.app_config import AppConfig
from pwguard.exceptions.base import PwguardException
from pwguard.utils.logger import _setup_logging

logger = logging.getLogger(__name__)


def _register_blueprints(app: Flask):
    from pwguard.api.v1.health import health_bp
    from pwguard.api.v1.password import password_bp

    app.register_blueprint(password_bp, url_prefix="/api/v1/password")
    app.register_blueprint(health_bp, url_prefix="/health")

    logger.info("Blueprints registered")


def _register_error_handlers(app: Flask):
    @app.errorhandler(PwguardException)
    def handle_pwguard_exception(e: PwguardException):
        if e.status_code >= 500:
            logger.error(f"Request failed: {e}", exc_info=True)
        else:
            logger.warning(f"Request rejected: {e.to_log_dict()}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        error = PwguardException(
            user_message=e.description,
            technical_message=f"HTTP {e.code}: {e.name}",
            status_code=e.code,
        )
        return jsonify(error.to_dict()), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_exception(e: Exception):
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        error = PwguardException(original_exception=repr(e))
        return jsonify(error.to_dict()), error.status_code

    logger.info("Error handlers registered")


def create_app(config: AppConfig = None) -> Flask:
    if config is None:
        config = AppConfig.from_env()

    _setup_logging(
        app_name=config.app_name,
        log_level=config.log_level,
        log_dir=config.log_dir,
        console_output=config.console_output,
    )

    app = Flask(__name__)
    app.config["TESTING"] = config.testing
    app.config["PWGUARD_APP_NAME"] = config.app_name

    _register_blueprints(app)
    _register_error_handlers(app)

    @app.teardown_appcontext
    def teardown(exception=None):
        if exception:
            logger.error(f"Request failed with exception: {exception}", exc_info=True)

    logger.info(f"Pwguard app created with config {config.to_dict()}")
    return app
