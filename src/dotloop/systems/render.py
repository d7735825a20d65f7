from dotloop.events.bus import EVENT_MOUSE_MOVE, EVENT_SESSION_RESET
from dotloop.rendering.board_renderer import BoardRenderer
from dotloop.ui.layout import cell_at_point, compute_board_geometry, reset_button_rect, status_label_origin

PADDING = 4
GAME_OVER_TEXT = "Game over"


class RenderSystem:
    """Draws the session once per frame using only its public queries."""

    def __init__(self, session, window):
        self.session = session
        self.window = window
        self.hovered = None
        self._last_tile_layout = {}
        self._board_renderer = BoardRenderer(self, padding=PADDING)
        session.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)
        session.event_bus.subscribe(EVENT_SESSION_RESET, self.on_session_reset)

    def on_mouse_move(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            self.hovered = None
            return
        self.hovered = cell_at_point(x, y, self.window.width, self.window.height)

    def on_session_reset(self, sender, **kwargs):
        self.hovered = None

    def tile_layout(self):
        return dict(self._last_tile_layout)

    def build_layout(self):
        """Compute per-dot draw data without touching arcade."""
        tile_size, start_x, start_y = compute_board_geometry(self.window.width, self.window.height)
        self._board_renderer.render(None, tile_size, start_x, start_y, headless=True)
        return self.tile_layout()

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        if headless:
            self.build_layout()
            return
        tile_size, start_x, start_y = compute_board_geometry(self.window.width, self.window.height)
        self._board_renderer.render(arcade, tile_size, start_x, start_y, headless)
        label_x, label_y = status_label_origin(self.window.width)
        arcade.draw_text(
            self.session.status_text(),
            label_x,
            label_y,
            arcade.color.WHITE,
            14,
            anchor_x="center",
            anchor_y="center",
        )
        left, bottom, width, height = reset_button_rect(self.window.width)
        arcade.draw_lrbt_rectangle_filled(left, left + width, bottom, bottom + height, (60, 60, 60))
        arcade.draw_lrbt_rectangle_outline(left, left + width, bottom, bottom + height, (200, 200, 200), 2)
        arcade.draw_text(
            "Reset",
            left + width / 2,
            bottom + height / 2,
            arcade.color.WHITE,
            12,
            anchor_x="center",
            anchor_y="center",
        )
        if self.session.is_terminal():
            board_top = start_y + tile_size * self.session.size
            arcade.draw_text(
                GAME_OVER_TEXT,
                self.window.width / 2,
                (start_y + board_top) / 2,
                arcade.color.WHITE,
                32,
                anchor_x="center",
                anchor_y="center",
            )
