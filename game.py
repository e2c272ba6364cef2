import logging
import random
import threading
import time

import config
import physics
from broadcast import broadcast, send_to
from models import Direction, GameState, Phase, PlayerSlot

logger = logging.getLogger(__name__)


class PongGame:
    """Owns the authoritative GameState and serializes every change to it.

    Socket handlers and the tick loop both call in here. Each entry point
    mutates the state under one lock, collects the messages it wants sent and
    hands them to the broadcaster only after the lock is released.
    """

    def __init__(self, broadcaster, rng=None, clock=time.monotonic):
        self.state = GameState()
        self.broadcaster = broadcaster
        self.rng = rng or random.Random()
        self.clock = clock
        self.lock = threading.Lock()

    def _flush(self, outbox):
        if outbox:
            self.broadcaster.deliver(outbox)

    @property
    def phase(self):
        if self.state.running:
            return Phase.RUNNING
        if self.state.score.winner() is not None:
            return Phase.OVER
        return Phase.WAITING

    # Connection registry

    def connect(self, sid):
        """Assign a role to a new connection, or return None when the game is full."""
        outbox = []
        with self.lock:
            if sid in self.state.players:
                return self.state.players[sid].role

            if len(self.state.players) >= config.MAX_PLAYERS:
                outbox.append(send_to(sid, 'gameFull'))
                role = None
            else:
                role = self.state.free_role()
                self.state.players[sid] = PlayerSlot(role)
                outbox.append(send_to(sid, 'playerAssigned', role.value))
                outbox.append(send_to(sid, 'gameState', self.state.to_dict()))

        if role is None:
            logger.info("Rejected %s: game is full", sid)
        else:
            logger.info("Player connected: %s as %s", sid, role.label)
        self._flush(outbox)
        return role

    def disconnect(self, sid):
        outbox = []
        with self.lock:
            slot = self.state.players.pop(sid, None)
            if slot is None:
                return

            if not self.state.players:
                self.state.reset()
            else:
                # Survivor keeps its role and score and waits for a new opponent
                self.state.running = False
                outbox.append(broadcast('playerDisconnected'))

        logger.info("Player disconnected: %s (%s)", sid, slot.role.label)
        self._flush(outbox)

    # Session

    def ready(self, sid):
        outbox = []
        with self.lock:
            slot = self.state.players.get(sid)
            if slot is None:
                return
            slot.ready = True

            players = self.state.players
            if self.state.running or len(players) != config.MAX_PLAYERS:
                return
            # A finished match only leaves Over through a full reset
            if self.phase is Phase.OVER:
                return
            if not all(p.ready for p in players.values()):
                return

            self.state.running = True
            physics.serve_ball(self.state.ball, self.rng)
            snapshot = self.state.to_dict()
            outbox.append(broadcast('gameState', snapshot))
            outbox.append(broadcast('gameStart', snapshot))

        logger.info("Match started")
        self._flush(outbox)

    # Input

    def paddle_move(self, sid, direction):
        """Move the sender's paddle one step; anything out of phase is dropped."""
        direction = Direction.parse(direction)
        if direction is None:
            return

        outbox = []
        with self.lock:
            if not self.state.running:
                return
            slot = self.state.players.get(sid)
            if slot is None:
                return

            now = self.clock()
            if slot.last_input_at is not None and now - slot.last_input_at < config.INPUT_THROTTLE:
                return
            slot.last_input_at = now

            paddle = self.state.paddle_for(slot.role)
            if direction is Direction.UP:
                paddle.y = max(0, paddle.y - config.PADDLE_STEP)
            else:
                paddle.y = min(config.PADDLE_MAX_Y, paddle.y + config.PADDLE_STEP)

            outbox.append(broadcast('paddleUpdate', {
                'paddle1': self.state.paddle1.to_dict(),
                'paddle2': self.state.paddle2.to_dict(),
            }))

        self._flush(outbox)

    # Simulation

    def tick(self):
        outbox = []
        with self.lock:
            if not self.state.running or len(self.state.players) != config.MAX_PLAYERS:
                return

            for event in physics.step(self.state, self.rng):
                if isinstance(event, physics.GameOver):
                    logger.info("Game over: %s wins", event.winner.label)
                    outbox.append(broadcast('gameOver', {'winner': event.winner.label}))
                else:
                    logger.debug("Point for %s, score %s", event.role.label, self.state.score.to_dict())
                    outbox.append(broadcast('pointScored', {'player': event.role.value}))

            outbox.append(broadcast('ballUpdate', {
                'ball': self.state.ball.to_dict(),
                'score': self.state.score.to_dict(),
            }))

        self._flush(outbox)

    def run_forever(self, sleep):
        """Tick at a fixed interval; `sleep` is socketio.sleep so it cooperates with the server."""
        logger.info("Game loop started, tick every %.3fs", config.TICK_INTERVAL)
        while True:
            self.tick()
            sleep(config.TICK_INTERVAL)
