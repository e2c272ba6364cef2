import config
from models import Direction, GameState, PlayerSlot, Role


def test_initial_state():
    state = GameState()

    assert state.players == {}
    assert (state.ball.x, state.ball.y) == (400, 300)
    assert (state.ball.velocity_x, state.ball.velocity_y) == (5, 5)
    assert state.paddle1.y == state.paddle2.y == config.PADDLE_START_Y
    assert (state.score.player1, state.score.player2) == (0, 0)
    assert state.running is False


def test_reset_keeps_the_same_objects():
    state = GameState()
    ball, score = state.ball, state.score
    ball.x, ball.y = 12, 34
    state.paddle1.y = 0
    score.player1 = 3
    state.running = True

    state.reset()

    assert state.ball is ball and state.score is score
    assert (ball.x, ball.y) == (400, 300)
    assert state.paddle1.y == config.PADDLE_START_Y
    assert score.player1 == 0
    assert state.running is False


def test_free_role_fills_the_gap():
    state = GameState()
    assert state.free_role() is Role.ONE

    state.players['b'] = PlayerSlot(Role.TWO)
    assert state.free_role() is Role.ONE

    state.players['a'] = PlayerSlot(Role.ONE)
    assert state.free_role() is None


def test_snapshot_uses_wire_names():
    state = GameState()
    state.players['abc'] = PlayerSlot(Role.TWO)

    snapshot = state.to_dict()

    assert snapshot['players'] == {'abc': {'player': 2, 'ready': False}}
    assert snapshot['ball'] == {'x': 400, 'y': 300, 'velocityX': 5, 'velocityY': 5}
    assert snapshot['paddle1'] == {'y': 250}
    assert snapshot['score'] == {'player1': 0, 'player2': 0}
    assert snapshot['gameRunning'] is False


def test_direction_parse():
    assert Direction.parse('up') is Direction.UP
    assert Direction.parse('down') is Direction.DOWN
    for junk in ('UP', 'left', '', None, 1, {'direction': 'up'}):
        assert Direction.parse(junk) is None


def test_score_winner():
    state = GameState()
    assert state.score.winner() is None

    for _ in range(config.WINNING_SCORE):
        state.score.add_point(Role.TWO)

    assert state.score.winner() is Role.TWO
    assert Role.TWO.label == 'Player 2'
