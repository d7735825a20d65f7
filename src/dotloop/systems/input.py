from dotloop.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_DOT_CLICK,
    EVENT_RESET_REQUEST,
)
from dotloop.ui.layout import cell_at_point, point_in_rect, reset_button_rect

# arcade.MOUSE_BUTTON_LEFT
LEFT_BUTTON = 1


class InputSystem:
    """Maps window mouse presses onto dot clicks and the reset button."""

    def __init__(self, event_bus: EventBus, window):
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None or button != LEFT_BUTTON:
            return
        if point_in_rect(x, y, reset_button_rect(self.window.width)):
            self.event_bus.emit(EVENT_RESET_REQUEST)
            return
        cell = cell_at_point(x, y, self.window.width, self.window.height)
        if cell is None:
            return
        self.event_bus.emit(EVENT_DOT_CLICK, x=cell[0], y=cell[1])
