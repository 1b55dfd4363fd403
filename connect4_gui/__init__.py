"""
connect4_gui - Two-player Connect Four with a pygame window

This package provides the board model, win detection and turn state machine
for Connect Four, plus a mouse-driven graphical interface around them.
"""

# Version number
__version__ = '0.1.0'
