"""
Defaults for the snake engine and its drivers.
Each value can be overridden through the environment.
"""
import os

DEFAULT_HEIGHT = int(os.getenv('SNAKE_HEIGHT', '10'))
DEFAULT_WIDTH = int(os.getenv('SNAKE_WIDTH', '10'))
DEFAULT_INITIAL_BODY = int(os.getenv('SNAKE_INITIAL_BODY', '2'))
DEFAULT_HEADING = os.getenv('SNAKE_HEADING', 'West')  # North, South, East or West
LOG_LEVEL = os.getenv('SNAKE_LOG_LEVEL', 'INFO').upper()
MAX_SIDE = int(os.getenv('SNAKE_MAX_SIDE', '100'))  # largest height or width the web API accepts
