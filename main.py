"""
Word Grid Server - Main Entry Point

This is the main entry point for the word grid game server.
It initializes the game service and starts the Flask-SocketIO application.
"""

from wordgrid import create_app
from wordgrid.config import Config, GameSettings
from wordgrid.services.game_service import initialize_game_service
from wordgrid.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # Fail fast on a bad game configuration
        settings = GameSettings.from_config(Config)
        print(f"✓ Game settings valid: {settings.total_attempts} attempts x {settings.total_letters} letters")

        initialize_game_service(Config)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Word Grid Server Starting")

        print(f"\nStarting Word Grid Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Grid Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
