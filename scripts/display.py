import logging

import numpy as np
import pygame

from settings import BLACK

logger = logging.getLogger(__name__)


class DisplayError(RuntimeError):
    """Raised when the window is used before it is open."""


class Graphics:
    """Drawing context bound to one back buffer until disposed."""

    def __init__(self, surface, antialias=True):
        self._surface = surface
        self._antialias = antialias
        self._color = BLACK

    def _target(self):
        if self._surface is None:
            raise DisplayError("graphics context used after dispose()")
        return self._surface

    def set_color(self, color):
        self._color = color

    def fill_rect(self, x, y, width, height):
        pygame.draw.rect(self._target(), self._color, (x, y, width, height))

    def draw_line(self, x1, y1, x2, y2):
        if self._antialias:
            pygame.draw.aaline(self._target(), self._color, (x1, y1), (x2, y2))
        else:
            pygame.draw.line(self._target(), self._color, (x1, y1), (x2, y2), 1)

    def dispose(self):
        self._surface = None


class BufferStrategy:
    """A ring of off-screen surfaces; each show() presents one and moves on."""

    def __init__(self, display, num_buffers, antialias=True):
        self._display = display
        self._antialias = antialias
        size = display.screen.get_size()
        self._buffers = [pygame.Surface(size) for _ in range(num_buffers)]
        self._index = 0

    def __len__(self):
        return len(self._buffers)

    def draw_graphics(self):
        return Graphics(self._buffers[self._index], self._antialias)

    def show(self):
        screen = self._display.screen
        screen.blit(self._buffers[self._index], (0, 0))
        pygame.display.flip()
        self._index = (self._index + 1) % len(self._buffers)


class Display:
    def __init__(self, title, width, height, antialias=True):
        self.title = title
        self.width = width
        self.height = height
        self.antialias = antialias
        self._screen = None
        self.buffer_strategy = None

    @property
    def is_open(self):
        return self._screen is not None

    @property
    def screen(self):
        if not self.is_open:
            raise DisplayError("display is not open")
        return self._screen

    def open(self):
        pygame.init()
        self._screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.title)
        logger.info("Opened %dx%d window '%s'", self.width, self.height, self.title)

    def create_buffer_strategy(self, num_buffers):
        self.buffer_strategy = BufferStrategy(self, num_buffers, self.antialias)
        logger.debug("Created buffer strategy with %d buffers", num_buffers)

    def set_title(self, text):
        pygame.display.set_caption(text)

    def pump_events(self, mouse_input):
        """Drain the event queue; returns False once the user asked to quit."""
        keep_running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                keep_running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                keep_running = False
            else:
                mouse_input.handle_event(event)
        return keep_running

    def snapshot(self):
        frame = pygame.surfarray.array3d(self.screen)
        # (width, height, channels) -> (height, width, channels)
        return np.transpose(frame, (1, 0, 2))

    def close(self):
        self.buffer_strategy = None
        self._screen = None
        pygame.quit()
        logger.info("Closed window '%s'", self.title)
