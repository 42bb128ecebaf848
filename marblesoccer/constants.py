"""Physical and layout constants of the marble soccer simulation."""

G = 9.81
MOVING_THRESHOLD = 0.0001

PLAYER_RADIUS = 20
PLAYER_MASS = 12
NUM_TEAM_PLAYERS = 5

BALL_RADIUS = 14
BALL_MASS = 4

MAX_AXIS_VELOCITY = 500
MIN_AXIS_VELOCITY = -MAX_AXIS_VELOCITY

TIME_DELTA = 0.01
FPS = 120

NET_SIZE = 6 * PLAYER_RADIUS
PLAYGROUND_WIDTH = 960
PLAYGROUND_HEIGHT = 640

DECELERATION = 4 * G