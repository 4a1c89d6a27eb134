"""
Arcade window that draws a SimSnapshot. Presentation only: it never
mutates simulation state.
"""

import arcade

from .constants import BOMB, COLORS, ENEMY_STATS, HEART, MULTISHOT, SHIELD, WARNING
from .utils import clamp

POWERUP_COLORS = {
    HEART: COLORS["neon_pink"],
    SHIELD: COLORS["neon_cyan"],
    MULTISHOT: COLORS["neon_green"],
    BOMB: COLORS["neon_orange"],
}


class ShmupWindow(arcade.Window):
    """Arcade window for rendering simulator snapshots"""

    def __init__(self, width: int, height: int):
        super().__init__(width, height, "Neon Shmup - Arcade")
        self.HUD_C = (220, 220, 220)
        self._snapshot = None

    def draw_snapshot(self, snapshot):
        self._snapshot = snapshot
        self.on_draw()

    # Simulation y grows downwards, arcade y grows upwards
    def _rect(self, x, y, w, h, color):
        top = self.height - y
        arcade.draw_lrbt_rectangle_filled(x, x + w, top - h, top, color)

    def on_draw(self):
        self.clear()
        arcade.set_background_color(COLORS["background"])
        snap = self._snapshot
        if snap is None:
            return

        # Lasers behind ships
        for l in snap.lasers:
            if l.state == WARNING:
                self._rect(0, l.y - 1, l.width, 2, (255, 0, 0, 60))
            else:
                self._rect(0, l.y - l.height / 2, l.width, l.height, COLORS["neon_red"])
                self._rect(0, l.y - l.height / 4, l.width, l.height / 2, COLORS["white"])

        for e in snap.enemies:
            self._rect(e.x, e.y, e.width, e.height, ENEMY_STATS[e.type]["color"])

        for pu in snap.powerups:
            arcade.draw_circle_filled(pu.x + pu.width / 2, self.height - pu.y - pu.height / 2,
                                      pu.width / 2, POWERUP_COLORS[pu.type])

        for b in snap.projectiles:
            if b.is_bomb:
                arcade.draw_circle_filled(b.x, self.height - b.y, b.width / 2, b.color)
            else:
                self._rect(b.x, b.y, b.width, b.height, b.color)

        for pt in snap.particles:
            alpha = int(255 * clamp(pt.life, 0, 1))
            arcade.draw_circle_filled(pt.x, self.height - pt.y, pt.size, (*pt.color, alpha))

        # Player flickers while invulnerable
        p = snap.player
        if p.invulnerable_time % 4 < 2:
            self._rect(p.x, p.y, p.width, p.height, COLORS["neon_cyan"])
            if p.shield_time > 0:
                arcade.draw_circle_outline(p.x + p.width / 2, self.height - p.y - p.height / 2,
                                           p.width * 0.7, COLORS["neon_cyan"], 2)

        # HUD - Health bar
        bar_w, bar_h = 180, 10
        x0, y0 = 12, self.height - 22
        arcade.draw_lrbt_rectangle_filled(x0, x0 + bar_w, y0, y0 + bar_h, (60, 60, 60))
        fill = bar_w * clamp(snap.hp / max(1e-6, snap.max_hp), 0, 1)
        if fill > 0:
            arcade.draw_lrbt_rectangle_filled(x0, x0 + fill, y0, y0 + bar_h, COLORS["neon_pink"])

        txt = f"SCORE: {snap.score}  HP: {snap.hp:.0f}"
        if snap.shield_seconds:
            txt += f"  SHIELD: {snap.shield_seconds}s"
        if snap.multishot_seconds:
            txt += f"  MULTI: {snap.multishot_seconds}s"
        if snap.game_over:
            txt += "  GAME OVER"
        arcade.draw_text(txt, 12, self.height - 40, self.HUD_C, 14)
