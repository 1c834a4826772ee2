# snaketerm/core/__init__.py
