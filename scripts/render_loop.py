import enum
import logging
import threading
import time

from ray_fan import cast_fan
from settings import BACKGROUND_COLOR, BOUND_COLOR, RAY_COLOR

logger = logging.getLogger(__name__)


class LoopStateError(RuntimeError):
    """start() while running, or stop() while stopped."""


class RenderLoopError(RuntimeError):
    """The render thread died; raised from stop() once it has been joined."""


class LoopState(enum.Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class FrameClock:
    """Fixed-timestep pacing plus a one second FPS window.

    Time that passes while a frame is overdue is dropped rather than queued:
    after a stall the loop renders once and starts counting from zero again.
    """

    def __init__(self, frame_period, now):
        self.time_per_render = frame_period
        self.delta = 0.0
        self.last_time = now
        self.timer = now
        self.frames = 0

    def advance(self, now):
        """Accumulate elapsed time; True when a render pass is due."""
        self.delta += (now - self.last_time) / self.time_per_render
        self.last_time = now

        if self.delta >= 1:
            self.delta = 0.0
            return True
        return False

    def frame_rendered(self):
        self.frames += 1

    def poll_fps(self, now):
        """Frames counted in the window that just closed, or None mid-window."""
        if now - self.timer >= 1.0:
            fps = self.frames
            self.frames = 0
            self.timer += 1.0
            return fps
        return None


class RenderLoop:
    def __init__(self, config, scene, mouse_input, display, clock=time.perf_counter):
        self.config = config
        self.scene = scene
        self.mouse_input = mouse_input
        self.display = display
        self._clock = clock

        self._lock = threading.Lock()
        self._state = LoopState.STOPPED
        self._thread = None
        self._stop_requested = threading.Event()
        self._finished = threading.Event()
        self._error = None

    @property
    def state(self):
        if (
            self._state is LoopState.RUNNING
            and self._stop_requested.is_set()
            and self._finished.is_set()
        ):
            return LoopState.STOPPED
        return self._state

    def is_alive(self):
        return self._thread is not None and not self._finished.is_set()

    def _finish_teardown(self):
        """Complete a stop whose render thread has exited; returns its crash, if any.

        Called with the lock held.
        """
        if self.state is not LoopState.STOPPED or self._thread is None:
            return None

        self._thread.join()
        self._thread = None
        self._state = LoopState.STOPPED
        error, self._error = self._error, None
        return error

    def _report_unraised(self, error):
        if error is not None:
            logger.error(
                "Render thread terminated with an error before an interrupted stop() returned",
                exc_info=error,
            )

    def start(self):
        with self._lock:
            self._report_unraised(self._finish_teardown())
            if self._state is LoopState.RUNNING:
                raise LoopStateError("render loop is already running")

            self._stop_requested.clear()
            self._finished.clear()
            self._error = None
            self._thread = threading.Thread(target=self.run, name="render-loop", daemon=True)
            self._state = LoopState.RUNNING
            self._thread.start()
        logger.info("Render loop started at %s FPS target", self.config.fps)

    def stop(self):
        if self._thread is threading.current_thread():
            raise LoopStateError("stop() called from the render thread")

        with self._lock:
            self._report_unraised(self._finish_teardown())
            if self._state is LoopState.STOPPED:
                raise LoopStateError("render loop is not running")

            self._stop_requested.set()
            try:
                self._finished.wait()
            except KeyboardInterrupt:
                logger.error("Interrupted while waiting for the render thread to finish")
                self._report_unraised(self._finish_teardown())
                raise

            error = self._finish_teardown()
        logger.info("Render loop stopped")

        if error is not None:
            raise RenderLoopError("render thread terminated with an error") from error

    def run(self):
        """Body of the render thread; ticks until a stop is requested."""
        frame_clock = FrameClock(self.config.frame_period, self._clock())
        try:
            while not self._stop_requested.is_set():
                self.tick(frame_clock)
                if self.config.idle_sleep:
                    time.sleep(self.config.idle_sleep)
        except Exception as exc:
            logger.exception("Render thread crashed")
            self._error = exc
        finally:
            self._finished.set()

    def tick(self, frame_clock):
        now = self._clock()
        if frame_clock.advance(now):
            self.render()
            frame_clock.frame_rendered()

        fps = frame_clock.poll_fps(now)
        if fps is not None:
            self.display.set_title(f"{self.config.title} | {fps} FPS")
            logger.debug("%d FPS", fps)

    def render(self):
        """One render pass; returns the rays drawn, or None when nothing was drawn."""
        strategy = self.display.buffer_strategy
        if strategy is None:
            self.display.create_buffer_strategy(self.config.buffer_count)
            return None

        mouse_x, mouse_y = self.mouse_input.snapshot()
        rays = cast_fan(
            self.scene.bounds,
            mouse_x,
            mouse_y,
            self.config.resolution,
            self.config.max_distance,
        )

        g = strategy.draw_graphics()
        try:
            g.set_color(BACKGROUND_COLOR)
            g.fill_rect(0, 0, self.config.width, self.config.height)

            g.set_color(BOUND_COLOR)
            for bound in self.scene.bounds:
                g.draw_line(*bound)

            g.set_color(RAY_COLOR)
            for ray in rays:
                g.draw_line(*ray)
        finally:
            g.dispose()

        strategy.show()
        return rays
