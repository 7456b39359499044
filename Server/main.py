"""
Daily Word Game Server - Main Entry Point

This is the main entry point for the daily word game server.
It validates the word lists, initializes all services and starts the Flask
application.
"""

import os
from daily_wordle import create_app
from daily_wordle.config import config, validate_word_list_integrity, ANSWER_WORDS
from daily_wordle.services.dictionary_service import get_dictionary_service
from daily_wordle.services.storage_service import get_storage_service, WORDS_COLLECTION
from daily_wordle.utils.game_logger import game_logger


def seed_dictionary_if_empty():
    """Copy the bundled dictionary into the store the first time it is used."""
    dictionary = get_dictionary_service()
    store = get_storage_service()
    if dictionary is None or dictionary.store is None:
        return

    if store.get(WORDS_COLLECTION, ANSWER_WORDS[0]) is None:
        count = dictionary.seed_store(store)
        print(f"✓ Seeded dictionary collection with {count} words")
        game_logger.logger.info(f"Seeded dictionary collection with {count} words")


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('APP_ENV', 'default')]

    try:
        print("Validating word lists...")
        validate_word_list_integrity()
        print("✓ Word lists valid")

        print(f"Creating Flask application ({config_class.STORE_BACKEND} store)...")
        app = create_app(config_class)
        print("✓ Flask application created successfully")

        seed_dictionary_if_empty()

        game_logger.logger.info("Daily Word Server Starting")

        print(f"\nStarting Daily Word Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Allowed origins: {', '.join(config_class.ALLOWED_ORIGINS)}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Daily Word Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise
    finally:
        store = get_storage_service()
        if store is not None:
            store.close_connection()


if __name__ == '__main__':
    main()
