import os

# Field geometry
FIELD_WIDTH = 800
FIELD_HEIGHT = 600

# Ball
BALL_RADIUS = 10
BALL_START_X = FIELD_WIDTH / 2
BALL_START_Y = FIELD_HEIGHT / 2
BALL_START_VELOCITY = 5
BALL_BASE_SPEED = 5
BALL_VERTICAL_SPREAD = 5  # velocityY is drawn from [-spread/2, spread/2)

# Paddles
PADDLE_WIDTH = 10
PADDLE_HEIGHT = 100
PADDLE1_X = 20
PADDLE2_X = FIELD_WIDTH - 30
PADDLE_START_Y = 250
PADDLE_STEP = 12
PADDLE_MAX_Y = FIELD_HEIGHT - PADDLE_HEIGHT
PADDLE_ACCELERATION = 1.02

# Rules
MAX_PLAYERS = 2
WINNING_SCORE = 5

# Timing (seconds)
TICK_INTERVAL = 0.033  # ~30 updates per second
INPUT_THROTTLE = 0.016

# Process
HOST = os.environ.get('HOST', '0.0.0.0')
PORT = int(os.environ.get('PORT', 3000))
SECRET_KEY = os.environ.get('SECRET_KEY', 'pong-secret-key')
CORS_ALLOWED_ORIGINS = os.environ.get('CORS_ALLOWED_ORIGINS', '*')
DEBUG = os.environ.get('PONG_DEBUG', '').lower() in ('1', 'true', 'yes')
