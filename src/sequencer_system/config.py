"""
Sequencer configuration
"""

from dataclasses import dataclass, field


@dataclass
class IntroConfig:
    """Timing and haptics of the scripted intro"""
    fast_duration: float = 3.0
    slow_duration: float = 0.7
    pause_duration: float = 1.0
    total_duration: float = 4.7  # hand-off deadline, independent of the phase timers

    buzz_intensity: float = 0.3
    buzz_sharpness: float = 0.2
    hammer_intensity: float = 0.8
    hammer_sharpness: float = 0.5

    def validate(self) -> None:
        for name in ("fast_duration", "slow_duration", "pause_duration", "total_duration"):
            if getattr(self, name) <= 0:
                raise ValueError(f"Intro {name} must be positive, got {getattr(self, name)}")
        for name in ("buzz_intensity", "buzz_sharpness", "hammer_intensity", "hammer_sharpness"):
            if not (0.0 <= getattr(self, name) <= 1.0):
                raise ValueError(f"Intro {name} must be 0.0-1.0, got {getattr(self, name)}")


@dataclass
class InteractionConfig:
    """Gesture thresholds, haptic rate and transition timings of the engine"""
    haptic_rate_hz: float = 32.0
    long_press_duration: float = 0.5
    hint_display_duration: float = 3.0
    hint_reveal_threshold: float = 0.7
    min_touch_intensity: float = 0.3
    initial_spread_radius: float = 150.0

    pulse_sharpness: float = 0.5
    reveal_pulse_intensity: float = 1.0
    reset_pulse_intensity: float = 0.5

    # Base (dark) visual mode: gestures and the reset control only work here
    dark_mode: bool = True

    # Nominal animation durations handed to the render surface
    spread_transition: float = 0.6
    reset_transition: float = 0.5
    hint_fade_transition: float = 0.5

    @property
    def haptic_interval(self) -> float:
        """Minimum seconds between derived haptic pulses"""
        return 1.0 / self.haptic_rate_hz

    def validate(self) -> None:
        if self.haptic_rate_hz <= 0:
            raise ValueError(f"Haptic rate must be positive, got {self.haptic_rate_hz}")
        if self.long_press_duration <= 0:
            raise ValueError(f"Long-press duration must be positive, got {self.long_press_duration}")
        if self.hint_display_duration <= 0:
            raise ValueError(f"Hint duration must be positive, got {self.hint_display_duration}")
        if not (0.0 <= self.min_touch_intensity <= 1.0):
            raise ValueError(f"Minimum touch intensity must be 0.0-1.0, got {self.min_touch_intensity}")
        if not (0.0 <= self.hint_reveal_threshold <= 1.0):
            raise ValueError(f"Hint reveal threshold must be 0.0-1.0, got {self.hint_reveal_threshold}")
        if self.initial_spread_radius <= 0:
            raise ValueError(f"Initial spread radius must be positive, got {self.initial_spread_radius}")


@dataclass
class FeedbackConfig:
    """Sound files and per-channel volumes"""
    sounds_folder: str = "sounds"
    torch_volume: float = 0.3
    welcome_volume: float = 0.5
    door_volume: float = 0.4

    def validate(self) -> None:
        for name in ("torch_volume", "welcome_volume", "door_volume"):
            if not (0.0 <= getattr(self, name) <= 1.0):
                raise ValueError(f"{name} must be 0.0-1.0, got {getattr(self, name)}")


@dataclass
class SurfaceConfig:
    """Render surface extent in points"""
    width: int = 390
    height: int = 844

    @property
    def center(self):
        return (self.width / 2, self.height / 2)

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Surface size must be positive, got {self.width}x{self.height}")


@dataclass
class AppConfig:
    """Main application configuration"""
    surface: SurfaceConfig = field(default_factory=SurfaceConfig)
    intro: IntroConfig = field(default_factory=IntroConfig)
    interaction: InteractionConfig = field(default_factory=InteractionConfig)
    feedback: FeedbackConfig = field(default_factory=FeedbackConfig)

    frame_duration_ms: float = 16.0  # ~60 FPS
    skip_intro: bool = False

    @property
    def target_fps(self) -> float:
        """Target FPS derived from frame duration"""
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """Validate every section"""
        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")
        self.surface.validate()
        self.intro.validate()
        self.interaction.validate()
        self.feedback.validate()
