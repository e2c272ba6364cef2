"""
Fixed-tick ball simulation: wall bounces, paddle hits and scoring.

Every function here mutates the GameState it is given and has no knowledge of
the network; the game decides what to broadcast from the returned events.
"""

from collections import namedtuple

import config
from models import Role

PointScored = namedtuple('PointScored', ['role'])
GameOver = namedtuple('GameOver', ['winner'])


def serve_ball(ball, rng):
    """Centre the ball and give it a fresh random velocity."""
    ball.x = config.BALL_START_X
    ball.y = config.BALL_START_Y
    ball.velocity_x = (1 if rng.random() > 0.5 else -1) * config.BALL_BASE_SPEED
    ball.velocity_y = (rng.random() - 0.5) * config.BALL_VERTICAL_SPREAD


def bounce_walls(ball):
    radius = config.BALL_RADIUS
    if ball.y - radius <= 0:
        ball.velocity_y = -ball.velocity_y
        ball.y = radius
    elif ball.y + radius >= config.FIELD_HEIGHT:
        ball.velocity_y = -ball.velocity_y
        ball.y = config.FIELD_HEIGHT - radius


def overlaps_paddle(ball, paddle_x, paddle):
    radius = config.BALL_RADIUS
    return (
        ball.x - radius <= paddle_x + config.PADDLE_WIDTH
        and ball.x + radius >= paddle_x
        and ball.y + radius >= paddle.y
        and ball.y - radius <= paddle.y + config.PADDLE_HEIGHT
    )


def _reflect(ball):
    ball.velocity_x = -ball.velocity_x * config.PADDLE_ACCELERATION
    ball.velocity_y = ball.velocity_y * config.PADDLE_ACCELERATION


def bounce_paddles(ball, paddle1, paddle2):
    """Reflect the ball off whichever paddle it is heading into.

    A paddle only counts when the ball moves toward it, so a ball still
    overlapping a paddle on the next tick cannot bounce twice.
    """
    hits = []

    # Left paddle, only while moving left
    if ball.velocity_x < 0 and overlaps_paddle(ball, config.PADDLE1_X, paddle1):
        _reflect(ball)
        ball.x = config.PADDLE1_X + config.PADDLE_WIDTH + config.BALL_RADIUS
        hits.append(Role.ONE)

    # Right paddle, only while moving right
    if ball.velocity_x > 0 and overlaps_paddle(ball, config.PADDLE2_X, paddle2):
        _reflect(ball)
        ball.x = config.PADDLE2_X - config.BALL_RADIUS
        hits.append(Role.TWO)

    return hits


def check_goal(ball):
    """Return the role that scores when the ball has left the field, else None."""
    if ball.x < -config.BALL_RADIUS:
        return Role.TWO
    if ball.x > config.FIELD_WIDTH + config.BALL_RADIUS:
        return Role.ONE
    return None


def step(state, rng):
    """Advance the simulation one tick and return the scoring events."""
    ball = state.ball
    events = []

    ball.x += ball.velocity_x
    ball.y += ball.velocity_y

    bounce_walls(ball)
    bounce_paddles(ball, state.paddle1, state.paddle2)

    scorer = check_goal(ball)
    if scorer is not None:
        points = state.score.add_point(scorer)
        serve_ball(ball, rng)
        if points >= config.WINNING_SCORE:
            state.running = False
            events.append(GameOver(scorer))
        else:
            events.append(PointScored(scorer))

    return events
