import os
from dotenv import load_dotenv

# Load .env file only in development environment
if os.environ.get('FLASK_ENV') != 'production':
    load_dotenv()

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'a_very_secret_key_for_dev')
    GOOGLE_API_KEY = os.environ.get('GOOGLE_API_KEY') or os.environ.get('API_KEY')
    GEMINI_MODEL = os.environ.get('GEMINI_MODEL', 'gemini-2.5-flash')
    ARTICLE_EXTRACTOR = os.environ.get('ARTICLE_EXTRACTOR', 'model').lower()
    MIN_ARTICLE_LENGTH = int(os.environ.get('MIN_ARTICLE_LENGTH', 150))
    NEWS_HEADLINE_COUNT = int(os.environ.get('NEWS_HEADLINE_COUNT', 5))
    FLASK_ENV = os.environ.get('FLASK_ENV', 'development')
    FLASK_DEBUG = os.environ.get('FLASK_DEBUG', 'False').lower() == 'true'

    if not GOOGLE_API_KEY:
        raise ValueError("No GOOGLE_API_KEY provided in environment variables")
    if ARTICLE_EXTRACTOR not in ('model', 'newspaper'):
        raise ValueError("ARTICLE_EXTRACTOR must be 'model' or 'newspaper'")

class DevelopmentConfig(Config):
    DEBUG = True

class ProductionConfig(Config):
    DEBUG = False
    FLASK_ENV = 'production'

def get_config():
    env = os.environ.get('FLASK_ENV', 'development')
    if env == 'development':
        return DevelopmentConfig
    return ProductionConfig
