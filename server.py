import logging
import time

from flask import Flask, render_template, request
from flask_socketio import SocketIO

import config
from broadcast import SocketIOBroadcaster
from game import PongGame

logger = logging.getLogger(__name__)


def create_app(rng=None, clock=time.monotonic):
    """Build the Flask app, its Socket.IO server and the single shared game."""
    app = Flask(__name__)
    app.config['SECRET_KEY'] = config.SECRET_KEY

    # always_connect lets the client receive gameFull before it is dropped
    socketio = SocketIO(
        app,
        cors_allowed_origins=config.CORS_ALLOWED_ORIGINS,
        always_connect=True,
        logger=config.DEBUG,
        engineio_logger=config.DEBUG,
    )

    game = PongGame(SocketIOBroadcaster(socketio), rng=rng, clock=clock)

    @app.route('/')
    def index():
        return render_template('index.html')

    # Socket events
    @socketio.on('connect')
    def handle_connect(auth=None):
        if game.connect(request.sid) is None:
            return False

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        game.disconnect(request.sid)

    @socketio.on('playerReady')
    def handle_player_ready(*args):
        game.ready(request.sid)

    @socketio.on('paddleMove')
    def handle_paddle_move(direction=None):
        game.paddle_move(request.sid, direction)

    @socketio.on_error_default
    def handle_error(e):
        logger.exception("Error while handling event from %s", request.sid)

    return app, socketio, game


def main():
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    app, socketio, game = create_app()
    socketio.start_background_task(game.run_forever, socketio.sleep)
    logger.info("Server is running on port %s", config.PORT)
    socketio.run(app, host=config.HOST, port=config.PORT, allow_unsafe_werkzeug=True)


if __name__ == '__main__':
    main()
