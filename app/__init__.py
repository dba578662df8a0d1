"""
Flask application factory for the landing page fixture site.

The fixture site renders a page shaped like the Waitly landing page so
the browser suite can run without reaching the public internet, and so
individual navigation controls can be hidden on demand.
"""

import logging
from flask import Flask

from config import get_config

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None, **overrides) -> Flask:
    """
    Create and configure the fixture site.

    Args:
        config_name: Configuration environment name.
                     If None, uses HARNESS_ENV environment variable.
        **overrides: Individual config keys to override (e.g. HIDDEN_CONTROLS).

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    app.config.update(overrides)

    logger.info(f"Creating fixture site with config: {config_class.__name__}")

    # Register blueprints
    from app.routes.api import api_bp
    from app.routes.views import views_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(views_bp)

    return app
