import logging
import random

import pygame

from display import Display
from logging_config import setup_logging
from mouse_input import MouseInput
from render_loop import RenderLoop
from scene import Scene
from settings import VisualiserConfig

logger = logging.getLogger(__name__)

# How long the event pump waits between polls, in milliseconds
EVENT_POLL_MS = 5


class Visualiser:
    def __init__(self, config=None, display=None):
        self.config = config or VisualiserConfig()
        self.random = random.Random(self.config.seed)
        self.scene = Scene.random(
            self.config.bound_count, self.config.width, self.config.height, self.random
        )
        self.mouse_input = MouseInput()
        self.display = display or Display(
            self.config.title,
            self.config.width,
            self.config.height,
            antialias=self.config.antialias,
        )
        self.render_loop = RenderLoop(self.config, self.scene, self.mouse_input, self.display)

    def run(self):
        """Show the window and cast rays towards the mouse until it is closed."""
        self.display.open()
        try:
            self.render_loop.start()
            try:
                while self.render_loop.is_alive():
                    if not self.display.pump_events(self.mouse_input):
                        break
                    pygame.time.wait(EVENT_POLL_MS)
            finally:
                self.render_loop.stop()
        finally:
            self.display.close()


def main():
    setup_logging()
    Visualiser().run()


if __name__ == "__main__":
    main()
