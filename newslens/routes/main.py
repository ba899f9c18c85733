from datetime import datetime, timezone
from flask import Blueprint, jsonify, current_app

main_bp = Blueprint('main', __name__)

@main_bp.route('/', methods=['GET'])
def index():
    return "NewsLens proxy is running!"

@main_bp.route('/health', methods=['GET'])
def health_check():
    """Health endpoint."""
    google_api_key_status = "present" if current_app.config.get('GOOGLE_API_KEY') else "missing"

    return jsonify({
        "status": "ok",
        "message": "NewsLens proxy is healthy!",
        "dependencies": {
            "google_ai_key": google_api_key_status,
            "model": current_app.config.get('GEMINI_MODEL'),
            "article_extractor": current_app.config.get('ARTICLE_EXTRACTOR')
        },
        "timestamp": datetime.now(timezone.utc).isoformat()
    }), 200
