"""Arena dimensions, speeds and colours."""

import colorsys

from pong.geometry import Vec2

Color = tuple[float, float, float]


def _hsl(hue: float, saturation: float, lightness: float) -> Color:
    return colorsys.hls_to_rgb(hue / 360.0, lightness, saturation)


TOP_WALL = 300.0
BTM_WALL = -300.0
LEFT_WALL = -600.0
RIGHT_WALL = 600.0
WALL_THICKNESS = 10.0

PADDLE_SIZE = Vec2(20.0, 120.0)
BALL_DIAMETER = 5.0
PLAYER_COLOR: Color = _hsl(200.0, 1.0, 1.0)
COMPUTER_COLOR: Color = _hsl(100.0, 1.0, 1.0)
BALL_COLOR: Color = _hsl(50.0, 1.0, 1.0)
WALL_COLOR: Color = (1.0, 0.0, 0.5)

PADDLE_PADDING = 30.0
PADDLE_SPEED = 200.0
BALL_SPEED = 250.0
INITIAL_BALL_DIRECTION = Vec2(0.5, -0.5)

BACKGROUND_COLOR: Color = (0.1, 0.1, 0.1)