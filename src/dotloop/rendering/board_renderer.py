from __future__ import annotations

from typing import TYPE_CHECKING

from dotloop.ui.layout import tile_center

if TYPE_CHECKING:
    from dotloop.systems.render import RenderSystem

HEAD_OUTLINE = ((255, 255, 255), 3)
TRAIL_OUTLINE = ((255, 0, 255), 2)
CONNECTABLE_OUTLINE = ((255, 165, 0), 2)
HOVER_OUTLINE = ((0, 250, 250), 2)


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 4):
        self._rs = render_system
        self._padding = padding

    def outline_for(self, x: int, y: int):
        session = self._rs.session
        if session.is_trail_head(x, y):
            return HEAD_OUTLINE
        if session.trail_contains(x, y):
            return TRAIL_OUTLINE
        # Connectable hints only matter once a trail has been started.
        if session.trail() and session.can_connect(x, y):
            return CONNECTABLE_OUTLINE
        if self._rs.hovered == (x, y):
            return HOVER_OUTLINE
        return None

    def render(self, arcade, tile_size: int, start_x: float, start_y: float, headless: bool) -> None:
        rs = self._rs
        session = rs.session
        rs._last_tile_layout = {}
        draw_size = max(tile_size - self._padding, 4)
        radius = draw_size / 2
        for y in range(session.size):
            for x in range(session.size):
                center = tile_center(x, y, tile_size, start_x, start_y)
                color = session.color_at(x, y).rgb
                outline = self.outline_for(x, y)
                rs._last_tile_layout[(x, y)] = {
                    "center": center,
                    "radius": radius,
                    "color": color,
                    "outline": outline,
                }
                if headless:
                    continue
                arcade.draw_circle_filled(center[0], center[1], radius, color)
                if outline is not None:
                    outline_color, width = outline
                    arcade.draw_circle_outline(center[0], center[1], radius + 2, outline_color, width)
