"""
config.py - Runtime settings for the Four-in-a-Row game

Values come from environment variables where it makes sense to change them
per machine; the rest are fixed presentation constants. The Flask app loads
this module with ``app.config.from_object``, so every upper-case name here is
also available as ``app.config[NAME]``.
"""

import os

# Player colors used when the start form or command line leaves one blank
DEFAULT_P1_COLOR = os.getenv("FOURINAROW_P1_COLOR", "red")
DEFAULT_P2_COLOR = os.getenv("FOURINAROW_P2_COLOR", "blue")

# Web server
HOST = os.getenv("FOURINAROW_HOST", "127.0.0.1")
PORT = int(os.getenv("FOURINAROW_PORT", "5000"))

# Logging
DEBUG_LEVEL = os.getenv("FOURINAROW_DEBUG_LEVEL", "warning")
LOG_FILE = os.getenv("FOURINAROW_LOG_FILE")

# Rendering
HIGHLIGHT_COLOR = "gold"
DROP_OFFSET_PX = -50   # pixels per row for the CSS drop start position
DROP_OFFSET_ROWS = 2   # extra rows above the board the piece starts from

# Jinja2 whitespace control
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
