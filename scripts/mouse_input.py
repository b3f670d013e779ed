import threading

import pygame


class MouseInput:
    """Latest pointer position, shared between the event pump and the render thread.

    Writers replace the whole (x, y) pair under a lock, so readers never see a
    half-updated position. The last write wins; nothing orders writes against
    frame boundaries.
    """

    def __init__(self, x=0.0, y=0.0):
        self._lock = threading.Lock()
        self._position = (float(x), float(y))

    def update(self, x, y):
        position = (float(x), float(y))
        with self._lock:
            self._position = position

    def snapshot(self):
        with self._lock:
            return self._position

    def mouse_moved(self, pos):
        self.update(*pos)

    def mouse_dragged(self, pos):
        self.update(*pos)

    def handle_event(self, event):
        """Consume pointer motion; returns True when the event was used."""
        if event.type != pygame.MOUSEMOTION:
            return False

        if any(getattr(event, "buttons", ())):
            self.mouse_dragged(event.pos)
        else:
            self.mouse_moved(event.pos)
        return True
