import config
from quart import Quart
from dotenv import load_dotenv
from datetime import timedelta

load_dotenv(override=True)

from routers import api_blueprint
from repositories import get_store
from utils import not_found_response, error_response
from utils.logging_config import setup_logging, get_logger

def create_app(store=None):
    """Create and configure the Quart application.

    Args:
        store: Optional TagStore to install instead of the configured one
    """
    # Initialize logging first
    setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)
    logger = get_logger('App')
    logger.info(f"Initializing {config.APP_NAME} API...")

    app = Quart(__name__)

    # Quart config
    app.config['RELOAD_SECRET'] = config.RELOAD_SECRET
    app.config['SECRET_KEY'] = config.SECRET_KEY
    app.config['PERMANENT_SESSION_LIFETIME'] = timedelta(hours=4)
    app.config['MAX_CONTENT_LENGTH'] = 1 * 1024 * 1024  # JSON bodies only

    if store is not None:
        from repositories import set_store
        set_store(store)

    # Open the store now so a misconfigured backend fails at startup
    store = get_store()
    logger.info(f"Using {store.name} store")

    app.register_blueprint(api_blueprint, url_prefix='/api')

    @app.errorhandler(404)
    async def handle_not_found(e):
        return not_found_response("Endpoint not found")

    @app.errorhandler(405)
    async def handle_method_not_allowed(e):
        return error_response("Method not allowed", 405)

    return app

if __name__ == '__main__':
    import uvicorn
    app = create_app()
    uvicorn.run(app, host=config.FLASK_HOST, port=config.FLASK_PORT, log_level="info")
