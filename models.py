from enum import Enum

import config


class Role(Enum):
    ONE = 1
    TWO = 2

    @property
    def label(self):
        return f"Player {self.value}"


class Direction(Enum):
    UP = 'up'
    DOWN = 'down'

    @classmethod
    def parse(cls, value):
        """Return the matching direction, or None for anything unrecognized."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class Phase(Enum):
    WAITING = 'waiting'
    RUNNING = 'running'
    OVER = 'over'


class PlayerSlot:
    def __init__(self, role):
        self.role = role
        self.ready = False
        self.last_input_at = None  # monotonic seconds of the last accepted paddle input

    def to_dict(self):
        return {'player': self.role.value, 'ready': self.ready}


class Ball:
    def __init__(self):
        self.reset()

    def reset(self):
        self.x = config.BALL_START_X
        self.y = config.BALL_START_Y
        self.velocity_x = config.BALL_START_VELOCITY
        self.velocity_y = config.BALL_START_VELOCITY

    def to_dict(self):
        return {
            'x': self.x,
            'y': self.y,
            'velocityX': self.velocity_x,
            'velocityY': self.velocity_y,
        }


class Paddle:
    def __init__(self):
        self.reset()

    def reset(self):
        self.y = config.PADDLE_START_Y

    def to_dict(self):
        return {'y': self.y}


class Score:
    def __init__(self):
        self.reset()

    def reset(self):
        self.player1 = 0
        self.player2 = 0

    def add_point(self, role):
        if role is Role.ONE:
            self.player1 += 1
            return self.player1
        self.player2 += 1
        return self.player2

    def winner(self):
        if self.player1 >= config.WINNING_SCORE:
            return Role.ONE
        if self.player2 >= config.WINNING_SCORE:
            return Role.TWO
        return None

    def to_dict(self):
        return {'player1': self.player1, 'player2': self.player2}


class GameState:
    """The single authoritative record shared by every game component.

    It lives as long as the game that owns it and is reset in place, so
    anything holding a reference to its parts keeps seeing current values.
    """

    def __init__(self):
        self.players = {}  # {socket_id: PlayerSlot}
        self.ball = Ball()
        self.paddle1 = Paddle()
        self.paddle2 = Paddle()
        self.score = Score()
        self.running = False

    def reset(self):
        self.ball.reset()
        self.paddle1.reset()
        self.paddle2.reset()
        self.score.reset()
        self.running = False

    def role_of(self, sid):
        slot = self.players.get(sid)
        return slot.role if slot else None

    def paddle_for(self, role):
        return self.paddle1 if role is Role.ONE else self.paddle2

    def free_role(self):
        taken = {slot.role for slot in self.players.values()}
        for role in Role:
            if role not in taken:
                return role
        return None

    def to_dict(self):
        return {
            'players': {sid: slot.to_dict() for sid, slot in self.players.items()},
            'ball': self.ball.to_dict(),
            'paddle1': self.paddle1.to_dict(),
            'paddle2': self.paddle2.to_dict(),
            'score': self.score.to_dict(),
            'gameRunning': self.running,
        }
