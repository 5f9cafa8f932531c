import os


class Config:
    """Base configuration"""

    # Flask Settings
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB, contact payloads are small

    # Server Settings
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 5000))
    # Number of trusted reverse proxies in front of the app (0 = use the socket address)
    PROXY_FIX_X_FOR = int(os.environ.get('PROXY_FIX_X_FOR', 0))

    # MongoDB Settings
    MONGODB_URI = os.environ.get('MONGODB_URI', 'mongodb://localhost:27017/portfolio')
    MONGODB_DB_NAME = os.environ.get('MONGODB_DB_NAME')  # falls back to the database in the URI
    MONGODB_COLLECTION = os.environ.get('MONGODB_COLLECTION', 'contacts')
    MONGODB_TIMEOUT_MS = int(os.environ.get('MONGODB_TIMEOUT_MS', 5000))

    # CORS Settings
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # Contact Settings
    # 500 keeps the documented contract; 400 separates caller errors from storage errors
    VALIDATION_ERROR_STATUS = int(os.environ.get('VALIDATION_ERROR_STATUS', 500))

    # Owner Notification Settings
    OWNER_TELEGRAM_BOT_TOKEN = os.environ.get('OWNER_TELEGRAM_BOT_TOKEN')
    OWNER_TELEGRAM_CHAT_ID = os.environ.get('OWNER_TELEGRAM_CHAT_ID')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    LOG_LEVEL = 'INFO'


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    LOG_LEVEL = 'DEBUG'
    MONGODB_URI = 'mongodb://localhost:27017/portfolio_test'
    MONGODB_TIMEOUT_MS = 100
    # Never reach Telegram from the test suite
    OWNER_TELEGRAM_BOT_TOKEN = None
    OWNER_TELEGRAM_CHAT_ID = None


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, or based on FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
