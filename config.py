import os
from datetime import timedelta
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Database Settings
    _database_url = os.environ.get('DATABASE_URL')
    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///portfolio.db'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': 10,
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JSON Settings
    JSON_AS_ASCII = False

    # Site Settings
    CONTENT_DIR = os.environ.get('CONTENT_DIR', str(BASE_DIR / 'content'))
    SITE_URL = os.environ.get('SITE_URL', '')
    INDEX_PAGE = os.environ.get('INDEX_PAGE', 'index')

    # Proxy Settings: number of trusted reverse proxies in front of the app
    PROXY_FIX_X_FOR = int(os.environ.get('PROXY_FIX_X_FOR', '0'))

    # Articles Settings
    ARTICLES_LIMIT = int(os.environ.get('ARTICLES_LIMIT', '3'))
    MEDIUM_USERNAME = os.environ.get('MEDIUM_USERNAME')
    MEDIUM_CACHE_SECONDS = int(os.environ.get('MEDIUM_CACHE_SECONDS', '3600'))
    MEDIUM_RETRY_SECONDS = int(os.environ.get('MEDIUM_RETRY_SECONDS', '300'))

    # Contact Settings
    CONTACT_FORM_ENABLED = _env_bool('CONTACT_FORM_ENABLED', True)
    TELEGRAM_BOT_TOKEN = os.environ.get('TELEGRAM_BOT_TOKEN')
    TELEGRAM_CHAT_ID = os.environ.get('TELEGRAM_CHAT_ID')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # For in-memory SQLite during tests, keep engine options empty to avoid
    # passing invalid pool settings like pool_size to SQLite's StaticPool.
    SQLALCHEMY_ENGINE_OPTIONS = {}
    MEDIUM_USERNAME = None
    TELEGRAM_BOT_TOKEN = None
    TELEGRAM_CHAT_ID = None
    CONTACT_FORM_ENABLED = True


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
