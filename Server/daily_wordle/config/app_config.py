"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env beside this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _split_origins(value: str) -> list:
    return [origin.strip() for origin in value.split(',') if origin.strip()]


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Storage Settings
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'daily_wordle')
    STORE_BACKEND = os.getenv('STORE_BACKEND', 'mongo' if MONGO_URI else 'memory')
    DICTIONARY_SOURCE = os.getenv('DICTIONARY_SOURCE', 'bundled')

    # HTTP Settings
    ALLOWED_ORIGINS = _split_origins(
        os.getenv('ALLOWED_ORIGINS', 'https://alexanderbiba.github.io,http://localhost:3000')
    )
    LEADERBOARD_LIMIT = int(os.getenv('LEADERBOARD_LIMIT', 50))

    # Client Settings
    API_BASE_URL = os.getenv('API_BASE_URL', 'http://127.0.0.1:5000')
    REQUEST_TIMEOUT_SECONDS = float(os.getenv('REQUEST_TIMEOUT_SECONDS', 5))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    STORE_BACKEND = 'mongo'


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    STORE_BACKEND = 'memory'
    DICTIONARY_SOURCE = 'bundled'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
