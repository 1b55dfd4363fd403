"""
connect4_gui.interfaces - Presentation for Connect Four

scene.py describes a frame without pygame; gui.py opens the window and
runs the event loop.
"""

# gui imports pygame, so nothing is imported eagerly here
__all__ = []
