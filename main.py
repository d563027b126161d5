import os
import sys
import logging
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

logger = logging.getLogger(__name__)

VALID_ENVIRONMENTS = ['development', 'production', 'test']


def configure_logging():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler('lead_service.log'),
            logging.StreamHandler(sys.stdout)
        ]
    )


def validate_environment():
    """
    Validate runtime configuration; partner credentials only warn because
    each request reports them missing on its own
    """
    from assurerates.models.products import PRODUCTS
    from assurerates.services.config_resolver import missing_credential_names

    app_env = os.getenv('APP_ENV', 'development')
    if app_env not in VALID_ENVIRONMENTS:
        logger.error(f"Invalid APP_ENV: {app_env}")
        logger.info(f"Valid environments: {', '.join(VALID_ENVIRONMENTS)}")
        sys.exit(1)

    port = os.getenv('PORT', '5000')
    if not port.isdigit():
        logger.error(f"Invalid PORT: {port}")
        sys.exit(1)

    for product, schema in PRODUCTS.items():
        missing_vars = missing_credential_names(schema)
        if missing_vars:
            logger.warning(f"{product} submissions will fail until set: {', '.join(missing_vars)}")

    if not os.getenv('ACCESS_TOKEN_SECRET'):
        logger.warning("ACCESS_TOKEN_SECRET is not set; access grants will not survive a restart")


def setup_health_checks(app):
    """
    Add health check endpoints to the Flask app
    """
    @app.route('/health')
    def health_check():
        return {
            'status': 'healthy',
            'service': 'lead-capture',
            'version': os.getenv('APP_VERSION', '1.0.0'),
            'environment': app.config.get('APP_ENV', 'development')
        }

    @app.route('/ready')
    def readiness_check():
        from assurerates.models.products import PRODUCTS
        from assurerates.services.config_resolver import missing_credential_names

        unconfigured = [product for product, schema in PRODUCTS.items() if missing_credential_names(schema)]
        return {
            'status': 'ready' if not unconfigured else 'degraded',
            'unconfigured_products': unconfigured
        }


def configure_app(app):
    """Copy environment configuration onto the Flask app"""
    app.config['APP_ENV'] = os.getenv('APP_ENV', 'development')
    app.config['PARTNER_TIMEOUT_SECONDS'] = float(os.getenv('PARTNER_TIMEOUT_SECONDS', 10))
    app.config['ACCESS_TOKEN_SECRET'] = os.getenv('ACCESS_TOKEN_SECRET')
    app.config['LEAD_EVENT_BUS_NAME'] = os.getenv('LEAD_EVENT_BUS_NAME')
    app.config['AWS_REGION'] = os.getenv('AWS_REGION')
    setup_health_checks(app)
    return app


def main():
    """
    Main application entry point
    """
    configure_logging()
    try:
        validate_environment()

        port = int(os.getenv('PORT', 5000))
        debug = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'
        host = os.getenv('HOST', '0.0.0.0')

        logger.info(f"Starting lead capture service on {host}:{port}")
        logger.info(f"Environment: {os.getenv('APP_ENV', 'development')}, debug mode: {debug}")

        from assurerates.api.lead_api import app
        configure_app(app)
        app.config['DEBUG'] = debug

        logger.info("Lead capture service started successfully")
        app.run(host=host, port=port, debug=debug)

    except Exception as e:
        logger.error(f"Failed to start application: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
