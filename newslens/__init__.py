from flask import Flask
import logging

def init_analysis_service(app):
    """Build the analysis service on top of the shared Gemini client"""
    from .services.analysis_service import NewsAnalysisService
    from .services.gemini_client import GeminiClient, get_genai_client

    client = get_genai_client(app.config.get('GOOGLE_API_KEY'))
    gemini = GeminiClient(client, model=app.config.get('GEMINI_MODEL', 'gemini-2.5-flash'))
    app.logger.info(f"Using Gemini model {gemini.model}")
    return NewsAnalysisService.from_config(app.config, gemini)

def create_app(config_object, analysis_service=None):
    """Create and configure the Flask application"""
    app = Flask(__name__)

    # Configure logging first
    logging.basicConfig(level=logging.INFO)
    app.logger.setLevel(logging.INFO)

    # Load configuration
    try:
        app.config.from_object(config_object)
    except Exception as e:
        app.logger.error(f"Failed to load configuration: {e}")
        raise

    if analysis_service is None:
        analysis_service = init_analysis_service(app)
    app.extensions['newslens'] = analysis_service

    # Register blueprints
    try:
        from .routes.main import main_bp
        from .routes.proxy import proxy_bp
        app.register_blueprint(main_bp)
        app.register_blueprint(proxy_bp)
    except Exception as e:
        app.logger.error(f"Failed to initialize application routes: {e}")
        raise

    return app

__all__ = ['create_app']
