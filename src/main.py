"""Entry point for the Dot Loop puzzle.

Sets up the game session, the input/render systems and the Arcade window.
"""
from arcade import Window, run, set_background_color, color
from dotloop.session import Session
from dotloop.events.bus import EVENT_MOUSE_PRESS, EVENT_MOUSE_MOVE
from dotloop.systems.render import RenderSystem
from dotloop.systems.input import InputSystem
from dotloop.constants import WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE


class DotLoopWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.session = Session()
        self.event_bus = self.session.event_bus
        self.render_system = RenderSystem(self.session, self)
        self.input_system = InputSystem(self.event_bus, self)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y)


def main():
    DotLoopWindow()
    run()

if __name__ == "__main__":
    main()
