from flask import Blueprint, request, jsonify, current_app

from ..errors import MissingFieldError
from ..utils.urls import is_url

proxy_bp = Blueprint('proxy', __name__)

# Long names used by the Netlify proxy variant of the front-end
ACTION_ALIASES = {
    'analyzeNewsArticle': 'analyze',
    'translateAnalysisResult': 'translate',
    'fetchLatestNews': 'fetchNews',
}

ALL_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


def get_analysis_service():
    return current_app.extensions['newslens']


def read_body() -> dict:
    """Return the action fields, flattening a nested ``payload`` object."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return {}
    payload = body.get('payload')
    if isinstance(payload, dict):
        return {**payload, 'action': body.get('action')}
    return body


def require(body: dict, *fields: str, action: str) -> list:
    missing = [field for field in fields if not body.get(field)]
    if missing:
        raise MissingFieldError(f"Missing {' or '.join(missing)} for {action}")
    return [body[field] for field in fields]


def handle_analyze(service, body):
    article_url, language = require(body, 'articleUrl', 'language', action='analyze')
    if not is_url(article_url):
        raise MissingFieldError(f"Invalid articleUrl: {article_url}")
    return service.analyze(article_url.strip(), language).to_wire()


def handle_translate(service, body):
    analysis, target_language = require(body, 'analysis', 'targetLanguage', action='translate')
    return service.translate(analysis, target_language).to_wire()


def handle_translate_texts(service, body):
    texts, target_language = require(body, 'texts', 'targetLanguage', action='translateTexts')
    if not isinstance(texts, list) or not all(isinstance(text, str) for text in texts):
        raise MissingFieldError("texts must be a list of strings")
    return service.translate_texts(texts, target_language)


def handle_fetch_news(service, body):
    category, = require(body, 'category', action='fetchNews')
    return [headline.to_wire() for headline in service.fetch_news(category)]


ACTIONS = {
    'analyze': handle_analyze,
    'translate': handle_translate,
    'translateTexts': handle_translate_texts,
    'fetchNews': handle_fetch_news,
}


@proxy_bp.route('/api/analyze', methods=ALL_METHODS, provide_automatic_options=False)
def gemini_proxy():
    """
    Single entry point for the front-end.
    Expects JSON body: {"action": "analyze"|"translate"|"translateTexts"|"fetchNews", ...fields}
    """
    if request.method != 'POST':
        return jsonify({"error": "Method Not Allowed"}), 405

    try:
        body = read_body()
        action = body.get('action')
        if not action:
            raise MissingFieldError("Missing action")
        handler = ACTIONS.get(ACTION_ALIASES.get(action, action))
        if handler is None:
            raise MissingFieldError(f"Invalid action specified: {action}")

        current_app.logger.info(f"Handling proxy action: {action}")
        result = handler(get_analysis_service(), body)
        return jsonify(result), 200

    except Exception as e:
        current_app.logger.error(f"Error in gemini proxy: {e}", exc_info=True)
        message = str(e) or "An unexpected server error occurred."
        return jsonify({"error": message}), 500
