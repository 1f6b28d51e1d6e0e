"""
Sound Controller - pygame mixer cues and joystick-rumble haptics
"""

import enum
import os
from typing import Callable, Dict, Optional, Set

import pygame

from .interfaces import IFeedbackSink


# Length of a transient haptic event
TRANSIENT_PULSE_MS = 40


class FeedbackSounds(enum.Enum):
    """Feedback cues - stores file names, sounds are loaded at startup"""
    TORCH_ON = "torch_on.mp3"
    TORCH_OFF = "torch_off.mp3"
    WELCOME = "welcome.mp3"
    DOOR_OPEN = "door_open.mp3"
    DOOR_CLOSE = "door_close.mp3"

    def get_sound_path(self, sounds_folder: str) -> str:
        """Get the full path to the sound file"""
        return os.path.join(sounds_folder, self.value)


# Each cue stops its counterpart before starting
EXCLUSIVE_PAIRS = {
    FeedbackSounds.TORCH_ON: FeedbackSounds.TORCH_OFF,
    FeedbackSounds.TORCH_OFF: FeedbackSounds.TORCH_ON,
    FeedbackSounds.DOOR_OPEN: FeedbackSounds.DOOR_CLOSE,
    FeedbackSounds.DOOR_CLOSE: FeedbackSounds.DOOR_OPEN,
}


def clamp_volume(volume: float) -> float:
    return max(0.0, min(1.0, volume))


class SoundController(IFeedbackSink):
    """
    Plays feedback cues through pygame.mixer and haptics through the
    rumble motors of the first connected game controller.

    Nothing here is fatal. A missing sound file disables that cue, a
    missing audio device disables all cues, and without a rumble-capable
    controller every haptic call is a no-op for the whole session. Each
    kind of failure is logged once.
    """

    def __init__(self, feedback_config, logger):
        """
        Initialize pygame mixer, preload cues and probe haptics.

        Args:
            feedback_config: FeedbackConfig with sounds folder and volumes
            logger: ClassLogger instance for logging
        """
        self.config = feedback_config
        self.logger = logger
        self._sound_objects: Dict[FeedbackSounds, 'pygame.mixer.Sound'] = {}
        self._reported_failures: Set[str] = set()
        self._joystick: Optional['pygame.joystick.Joystick'] = None

        self.audio_available = self._init_mixer()
        if self.audio_available:
            self._load_sounds()
            self.set_torch_volume(feedback_config.torch_volume)
            self.set_welcome_volume(feedback_config.welcome_volume)
            self.set_door_volume(feedback_config.door_volume)

        self.haptics_available = self._init_haptics()

        self.logger.info(
            f"SoundController initialized: {len(self._sound_objects)}/{len(FeedbackSounds)} cues, "
            f"haptics {'on' if self.haptics_available else 'off'}"
        )

    def _init_mixer(self) -> bool:
        try:
            pygame.mixer.init()
            return True
        except pygame.error as e:
            self.logger.warning(f"Audio device unavailable, cues disabled: {e}")
            return False

    def _load_sounds(self) -> None:
        """Load every cue that exists on disk; missing cues stay silent"""
        for sound in FeedbackSounds:
            sound_path = sound.get_sound_path(self.config.sounds_folder)
            if not os.path.exists(sound_path):
                self.logger.warning(f"Sound file not found, cue {sound.name} disabled: {sound_path}")
                continue
            try:
                self._sound_objects[sound] = pygame.mixer.Sound(sound_path)
            except pygame.error as e:
                self.logger.warning(f"Failed to load sound {sound.name} from {sound_path}: {e}")

    def _init_haptics(self) -> bool:
        """Probe for a rumble-capable controller; checked once per session"""
        try:
            pygame.joystick.init()
            if pygame.joystick.get_count() == 0:
                self.logger.info("No game controller connected, haptics disabled")
                return False
            joystick = pygame.joystick.Joystick(0)
            joystick.init()
            if not joystick.rumble(0, 0, 1):
                self.logger.info(f"Controller '{joystick.get_name()}' has no rumble, haptics disabled")
                return False
            self._joystick = joystick
            return True
        except pygame.error as e:
            self.logger.warning(f"Haptics probe failed, haptics disabled: {e}")
            return False

    def _safely(self, label: str, action: Callable[[], object]) -> None:
        """Run a feedback action, absorbing device errors"""
        try:
            action()
        except (pygame.error, OSError) as e:
            if label not in self._reported_failures:
                self._reported_failures.add(label)
                self.logger.warning(f"Feedback '{label}' failed, continuing silently: {e}")

    def _play(self, sound: FeedbackSounds) -> None:
        counterpart = EXCLUSIVE_PAIRS.get(sound)
        if counterpart in self._sound_objects:
            self._safely(counterpart.name, self._sound_objects[counterpart].stop)

        sound_obj = self._sound_objects.get(sound)
        if sound_obj is None:
            return

        def restart():
            sound_obj.stop()
            sound_obj.play()

        self._safely(sound.name, restart)

    def torch_on(self) -> None:
        self._play(FeedbackSounds.TORCH_ON)

    def torch_off(self) -> None:
        self._play(FeedbackSounds.TORCH_OFF)

    def welcome(self) -> None:
        self._play(FeedbackSounds.WELCOME)

    def door_open(self) -> None:
        self._play(FeedbackSounds.DOOR_OPEN)

    def door_close(self) -> None:
        self._play(FeedbackSounds.DOOR_CLOSE)

    def _rumble(self, intensity: float, sharpness: float, duration_ms: int) -> None:
        if not self.haptics_available:
            return
        # Low-frequency motor carries the body, high-frequency motor the edge
        strength = clamp_volume(intensity)
        low = strength * (1.0 - 0.5 * clamp_volume(sharpness))
        high = strength * clamp_volume(sharpness)
        self._safely("rumble", lambda: self._joystick.rumble(low, high, duration_ms))

    def haptic_pulse(self, intensity: float, sharpness: float) -> None:
        self._rumble(intensity, sharpness, TRANSIENT_PULSE_MS)

    def haptic_continuous(self, intensity: float, sharpness: float, duration: float) -> None:
        self._rumble(intensity, sharpness, int(duration * 1000))

    def stop_all(self) -> None:
        if self.audio_available:
            self._safely("stop_all", pygame.mixer.stop)
        if self.haptics_available:
            self._safely("stop_rumble", self._joystick.stop_rumble)

    def _set_volume(self, sounds, volume: float) -> float:
        clamped = clamp_volume(volume)
        for sound in sounds:
            if sound in self._sound_objects:
                self._sound_objects[sound].set_volume(clamped)
        return clamped

    def set_torch_volume(self, volume: float) -> None:
        self.config.torch_volume = self._set_volume(
            (FeedbackSounds.TORCH_ON, FeedbackSounds.TORCH_OFF), volume)

    def set_welcome_volume(self, volume: float) -> None:
        self.config.welcome_volume = self._set_volume((FeedbackSounds.WELCOME,), volume)

    def set_door_volume(self, volume: float) -> None:
        self.config.door_volume = self._set_volume(
            (FeedbackSounds.DOOR_OPEN, FeedbackSounds.DOOR_CLOSE), volume)

    def cleanup(self) -> None:
        """Stop playback and release the mixer"""
        self.stop_all()
        if self.audio_available:
            self._safely("mixer_quit", pygame.mixer.quit)
        self.logger.info("SoundController cleaned up")
