import pygame
import pytest

from display import Display, DisplayError
from geometry import Segment
from mouse_input import MouseInput
from render_loop import RenderLoop
from scene import Scene
from settings import BLACK, LIGHT_GRAY, WHITE, VisualiserConfig


@pytest.fixture
def display():
    window = Display("Ray casting", 100, 100, antialias=False)
    window.open()
    yield window
    window.close()


def test_use_before_open_fails():
    window = Display("Ray casting", 100, 100)
    assert not window.is_open
    with pytest.raises(DisplayError):
        window.create_buffer_strategy(3)


def test_open_sets_caption_and_size(display):
    assert display.is_open
    assert display.buffer_strategy is None
    assert pygame.display.get_caption()[0] == "Ray casting"
    assert display.snapshot().shape == (100, 100, 3)

    display.set_title("Ray casting | 60 FPS")
    assert pygame.display.get_caption()[0] == "Ray casting | 60 FPS"


def test_buffer_strategy_rotates_buffers(display):
    display.create_buffer_strategy(3)
    strategy = display.buffer_strategy
    assert len(strategy) == 3

    g = strategy.draw_graphics()
    g.set_color(WHITE)
    g.fill_rect(0, 0, 100, 100)
    g.dispose()
    strategy.show()
    assert tuple(display.snapshot()[50, 50]) == WHITE

    # the next buffer has not been drawn on yet
    strategy.show()
    assert tuple(display.snapshot()[50, 50]) == BLACK


def test_disposed_graphics_cannot_draw(display):
    display.create_buffer_strategy(2)
    g = display.buffer_strategy.draw_graphics()
    g.dispose()
    with pytest.raises(DisplayError):
        g.draw_line(0, 0, 10, 10)


def test_render_pass_draws_bounds_and_clipped_rays(display):
    config = VisualiserConfig(
        width=100, height=100, resolution=4, max_distance=100.0, antialias=False
    )
    scene = Scene([Segment(10, 50, 90, 50)])
    mouse = MouseInput(50, 80)
    loop = RenderLoop(config, scene, mouse, display)

    assert loop.render() is None
    rays = loop.render()
    assert rays[3].length == pytest.approx(30)

    frame = display.snapshot()
    assert tuple(frame[50, 20]) == WHITE
    # ray pointing down and ray pointing right
    assert tuple(frame[90, 50]) == LIGHT_GRAY
    assert tuple(frame[80, 70]) == LIGHT_GRAY
    # ray pointing up stops at the wall; its far x sits a hair below 50
    assert LIGHT_GRAY in (tuple(frame[60, 49]), tuple(frame[60, 50]))
    assert tuple(frame[20, 49]) == BLACK
    assert tuple(frame[20, 50]) == BLACK


def test_pump_events_forwards_motion_and_reports_quit(display):
    mouse = MouseInput()

    pygame.event.post(pygame.event.Event(pygame.MOUSEMOTION, pos=(12, 34), rel=(0, 0), buttons=(0, 0, 0)))
    assert display.pump_events(mouse)
    assert mouse.snapshot() == (12.0, 34.0)

    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert not display.pump_events(mouse)
