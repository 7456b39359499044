"""
Daily Word Game Server Application Package

This package contains the daily word game: the guess evaluation and
leaderboard HTTP endpoints, and (in `daily_wordle.client`) the client-side
game state machine that talks to them.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def initialize_services(config_class=Config):
    """
    Build the storage, dictionary, daily word, game and leaderboard services.

    Returns:
        The document store the other services share
    """
    from .services.storage_service import initialize_storage_service
    from .services.dictionary_service import initialize_dictionary_service
    from .services.daily_word_service import initialize_daily_word_service
    from .services.game_service import initialize_game_service
    from .services.leaderboard_service import initialize_leaderboard_service

    store = initialize_storage_service(config_class)
    dictionary = initialize_dictionary_service(config_class, store)
    daily_words = initialize_daily_word_service(store)
    initialize_game_service(dictionary, daily_words)
    initialize_leaderboard_service(store, config_class.LEADERBOARD_LIMIT)
    return store


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions and services initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    initialize_services(config_class)

    # CORS headers only for the allow-listed origins
    CORS(app, origins=config_class.ALLOWED_ORIGINS)

    # Register blueprints
    from .controllers.word_controller import word_bp

    app.register_blueprint(word_bp)

    return app
