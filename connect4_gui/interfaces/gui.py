"""
gui.py - pygame window for Connect Four

ConnectFourApp owns the window, the frame clock and the font. It forwards
pointer events to the GameState it was given and draws build_scene() output
every frame.
"""

from typing import Optional

import pygame

from connect4_gui.debug import debug
from connect4_gui.game.layout import DISC_RADIUS, TILE_RADIUS
from connect4_gui.game.state import GameState
from connect4_gui.interfaces.scene import Scene, build_scene
from connect4_gui.utils import TILE_HOVER_COLOR

WINDOW_TITLE = "Connect 4"
DEFAULT_FONT_SIZE = 24
DEFAULT_FPS = 60
OUTLINE_WIDTH = 2
HIGHLIGHT_WIDTH = 4
QUIT_KEYS = (pygame.K_q,)


class ConnectFourApp:
    """Event loop and renderer around a single GameState."""

    def __init__(self, state: Optional[GameState] = None,
                 font_path: Optional[str] = None,
                 font_size: int = DEFAULT_FONT_SIZE,
                 fps: int = DEFAULT_FPS):
        self.state = state or GameState()
        self.font_path = font_path
        self.font_size = font_size
        self.fps = fps
        self.font: Optional[pygame.font.Font] = None
        self.running = False

    def load_font(self) -> pygame.font.Font:
        """
        Load the configured TTF file, or pygame's bundled font if none was
        given or the file cannot be read.
        """
        if not pygame.font.get_init():
            pygame.font.init()

        if self.font_path:
            try:
                return pygame.font.Font(self.font_path, self.font_size)
            except OSError as e:
                debug.warning(f"Could not load font {self.font_path!r} ({e}), using default", "gui")

        return pygame.font.Font(None, self.font_size)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Apply one pygame event to the game.

        Returns:
            False if the event asks the app to quit, True otherwise
        """
        if event.type == pygame.QUIT:
            debug.info("Window closed", "gui")
            return False

        if event.type == pygame.KEYDOWN:
            if event.key in QUIT_KEYS:
                debug.info("Quit key pressed", "gui")
                return False

        elif event.type == pygame.MOUSEMOTION:
            self.state.on_pointer_move(*event.pos)

        elif event.type == pygame.MOUSEBUTTONDOWN:
            pos = getattr(event, "pos", None)
            if pos is not None:
                self.state.on_pointer_move(*pos)
            self.state.on_click(event.button)

        return True

    def draw(self, surface: pygame.Surface) -> Scene:
        scene = build_scene(self.state.snapshot(), self.state.layout)
        if self.font is None:
            self.font = self.load_font()

        surface.fill(scene.background)

        for tile in scene.tiles:
            pygame.draw.rect(surface, tile.outline, pygame.Rect(tile.rect),
                             width=OUTLINE_WIDTH, border_radius=TILE_RADIUS)
            if tile.disc is None:
                continue
            center = tile.rect.center
            pygame.draw.circle(surface, tile.disc, center, DISC_RADIUS)
            if tile.highlighted:
                pygame.draw.circle(surface, TILE_HOVER_COLOR, center, DISC_RADIUS, width=HIGHLIGHT_WIDTH)

        for label in scene.labels:
            text = self.font.render(label.text, True, label.color)
            surface.blit(text, (label.center_x - text.get_width() // 2, label.y))

        return scene

    def run(self) -> None:
        """Open the window and process events until the player quits."""
        pygame.init()
        try:
            layout = self.state.layout
            screen = pygame.display.set_mode((layout.window_width, layout.window_height))
            pygame.display.set_caption(WINDOW_TITLE)
            self.font = self.load_font()
            clock = pygame.time.Clock()
            debug.info("Window opened", "gui")

            self.running = True
            while self.running:
                for event in pygame.event.get():
                    if not self.handle_event(event):
                        self.running = False
                        break

                self.draw(screen)
                pygame.display.flip()
                clock.tick(self.fps)
        finally:
            pygame.quit()
            debug.debug("pygame shut down", "gui")
