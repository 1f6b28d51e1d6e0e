"""
Pygame render surface - dark canvas, radial light, intro titles and hints
"""

from typing import Optional, Tuple

import pygame

from .controls import ResetControl
from .interfaces import IRenderSurface
from .tween import Tween
from .visual_frame import REVEAL_SUBTITLE, REVEAL_TITLE, HintVariant, VisualFrame


BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (220, 30, 30)
GRAY = (128, 128, 128)

# Light disc drawn as concentric rings, outermost first
GRADIENT_RINGS = 24
IDLE_LIGHT_RADIUS = 150.0


class PygameRenderSurface(IRenderSurface):
    """
    Draws VisualFrames into a pygame window.

    Scalar values (intensity, spread radius, intro offsets, hint alpha)
    are eased with Tweens over each frame's transition duration.
    """

    def __init__(self, width: int, height: int, logger, title: str = "The Dark",
                 reset_control: Optional[ResetControl] = None):
        self.width = width
        self.height = height
        self.logger = logger
        self.reset_control = reset_control or ResetControl.for_surface(width, height)

        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)

        self.title_font = pygame.font.SysFont(None, 96)
        self.subtitle_font = pygame.font.SysFont(None, 40)
        self.hint_font = pygame.font.SysFont(None, 28)
        self.small_font = pygame.font.SysFont(None, 18)

        self.frame = VisualFrame()
        self._intensity = Tween.hold(0.0)
        self._radius = Tween.hold(IDLE_LIGHT_RADIUS)
        self._top = Tween.hold(0.0)
        self._bottom = Tween.hold(0.0)
        self._hint_alpha = Tween.hold(0.0)
        self._daylight = Tween.hold(0.0)
        self._hint_text = ""

        self.logger.info(f"PygameRenderSurface initialized: {width}x{height}")

    def apply(self, frame: VisualFrame, now: float) -> None:
        duration = frame.transition_s
        self._intensity = self._intensity.retarget(frame.light_intensity, duration, now)
        self._radius = self._radius.retarget(frame.spread_radius, duration, now)
        self._daylight = self._daylight.retarget(1.0 if frame.spreading else 0.0, duration, now)

        if frame.intro_offsets is not None:
            top, bottom = frame.intro_offsets
            if self.frame.intro_offsets is None:
                self._top, self._bottom = Tween.hold(top, now), Tween.hold(bottom, now)
            else:
                self._top = self._top.retarget(top, duration, now)
                self._bottom = self._bottom.retarget(bottom, duration, now)

        if frame.hint_variant is not HintVariant.NONE:
            self._hint_text = frame.hint_variant.text
        hint_target = 0.0 if frame.hint_variant is HintVariant.NONE else 1.0
        self._hint_alpha = self._hint_alpha.retarget(hint_target, duration, now)

        self.frame = frame

    def _blit_centered(self, font, text: str, color, center: Tuple[float, float], alpha: int = 255) -> None:
        lines = text.split("\n")
        line_height = font.get_linesize()
        top = center[1] - line_height * len(lines) / 2
        for index, line in enumerate(lines):
            rendered = font.render(line.strip(), True, color)
            rendered.set_alpha(alpha)
            rect = rendered.get_rect(center=(center[0], top + line_height * (index + 0.5)))
            self.screen.blit(rendered, rect)

    def _draw_light(self, position: Optional[Tuple[float, float]], intensity: float, radius: float) -> None:
        if position is None or intensity <= 0 or radius <= 0:
            return
        size = int(radius * 2)
        # Opaque black canvas: BLEND_ADD adds RGB and ignores alpha, so the
        # falloff lives in the ring brightness
        glow = pygame.Surface((size, size))
        glow.fill(BLACK)
        for ring in range(GRADIENT_RINGS, 0, -1):
            fraction = ring / GRADIENT_RINGS
            level = min(255, int(255 * intensity * (1.0 - (ring - 1) / GRADIENT_RINGS)))
            pygame.draw.circle(glow, (level, level, level), (radius, radius), radius * fraction)
        self.screen.blit(glow, (position[0] - radius, position[1] - radius), special_flags=pygame.BLEND_ADD)

    def render(self, now: float) -> None:
        frame = self.frame
        daylight = self._daylight.value_at(now)
        level = int(255 * daylight)
        self.screen.fill((level, level, level))
        center = (self.width / 2, self.height / 2)

        if frame.intro_offsets is not None:
            self._blit_centered(self.subtitle_font, "Welcome To", WHITE,
                                (center[0] + self._top.value_at(now), center[1] - 50))
            self._blit_centered(self.title_font, "The Dark", WHITE,
                                (center[0] + self._bottom.value_at(now), center[1] + 20))
        elif frame.revealed:
            self._blit_centered(self.title_font, REVEAL_TITLE, RED, (center[0], center[1] - 20))
            self._blit_centered(self.small_font, REVEAL_SUBTITLE, GRAY, (center[0], center[1] + 30))
        else:
            alpha = int(255 * 0.7 * self._hint_alpha.value_at(now))
            if alpha > 0 and self._hint_text:
                self._blit_centered(self.hint_font, self._hint_text, WHITE, center, alpha)

        if frame.light_visible:
            self._draw_light(frame.light_position, self._intensity.value_at(now), self._radius.value_at(now))

        if frame.reset_available:
            pygame.draw.circle(self.screen, (60, 60, 60), self.reset_control.center, self.reset_control.radius)

        pygame.display.flip()

    def cleanup(self) -> None:
        pygame.display.quit()
        self.logger.info("PygameRenderSurface closed")
