# src/game/audio.py
"""
Fire-and-forget sound cues for the game.

The session only talks to the `AudioCues` interface; `ChiptuneAudio` renders
the cues with pygame.mixer from synthesised square/saw/sine samples, and
`SilentAudio` is used when there is no audio device (or in tests).
"""
from __future__ import annotations
import array
import logging
import math
from typing import Dict, List, Optional, Protocol, Tuple

import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050

CUE_BLIP = "blip"      # first press of a movement key
CUE_BOOM = "boom"      # collision
CUE_START = "start"    # start / restart
CUES = (CUE_BLIP, CUE_BOOM, CUE_START)

# (freq Hz, duration s, wave, peak gain)
CUE_SPECS: Dict[str, Tuple[float, float, str, float]] = {
    CUE_BLIP: (440.0, 0.1, "sine", 0.1),
    CUE_BOOM: (220.0, 0.5, "saw", 0.2),
    CUE_START: (880.0, 0.2, "sine", 0.1),
}

LOOP_NOTES = (440, 523, 659, 784, 659, 523)
LOOP_NOTE_S = 0.3
LOOP_STRIDE_S = 0.4     # one note every 0.4 s, silence fills the rest
LOOP_GAIN = 0.05


class AudioCues(Protocol):
    def play_cue(self, kind: str) -> None: ...
    def set_loop_enabled(self, enabled: bool) -> None: ...


class SilentAudio:
    """No-op cues. Keeps a log of calls so callers can be inspected."""
    def __init__(self):
        self.played: List[str] = []
        self.loop_enabled = False

    def play_cue(self, kind: str) -> None:
        self.played.append(kind)

    def set_loop_enabled(self, enabled: bool) -> None:
        self.loop_enabled = bool(enabled)


# ---- synthesis ----

def _osc(wave: str, t: float, freq: float) -> float:
    p = (t * freq) % 1.0
    if wave == "square":
        return 1.0 if p < 0.5 else -1.0
    if wave == "saw":
        return 2.0 * p - 1.0
    return math.sin(2.0 * math.pi * freq * t)


def tone(freq: float, duration: float, wave: str = "sine", gain: float = 0.1,
         total: Optional[float] = None, rate: int = SAMPLE_RATE) -> array.array:
    """
    Mono 16-bit samples of one note with an exponential decay to 1% at the
    end of `duration`. `total` pads with silence (for fixed-stride loops).
    """
    n = int(rate * duration)
    n_total = int(rate * (total if total is not None else duration))
    decay = math.log(0.01) / max(duration, 1e-6)
    samples = array.array("h")
    for i in range(n_total):
        if i >= n:
            samples.append(0)
            continue
        t = i / rate
        env = math.exp(decay * t)
        samples.append(int(_osc(wave, t, freq) * env * gain * 32767))
    return samples


def loop_samples(rate: int = SAMPLE_RATE) -> array.array:
    samples = array.array("h")
    for freq in LOOP_NOTES:
        samples.extend(tone(freq, LOOP_NOTE_S, "square", LOOP_GAIN, total=LOOP_STRIDE_S, rate=rate))
    return samples


class ChiptuneAudio:
    """pygame.mixer backend. Any mixer failure leaves it silent."""
    def __init__(self):
        self._initialized = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._loop: Optional[pygame.mixer.Sound] = None
        self._loop_channel: Optional[pygame.mixer.Channel] = None
        self.loop_enabled = False

    def init(self) -> bool:
        try:
            # pygame.init() may already have opened the mixer at its own rate
            if pygame.mixer.get_init():
                pygame.mixer.quit()
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 1024)
            pygame.mixer.init()
        except pygame.error as e:
            logger.error(f"Failed to initialize audio: {e}")
            return False
        # the device may still grant a different rate than requested
        rate = pygame.mixer.get_init()[0]
        for kind, (freq, duration, wave, gain) in CUE_SPECS.items():
            self._sounds[kind] = self._create_sound(tone(freq, duration, wave, gain, rate=rate))
        self._loop = self._create_sound(loop_samples(rate))
        self._initialized = True
        logger.info(f"Audio initialized ({len(self._sounds)} cues at {rate} Hz)")
        return True

    def _create_sound(self, samples: array.array) -> pygame.mixer.Sound:
        """Mono samples duplicated into the mixer's channel count."""
        channels = (pygame.mixer.get_init() or (SAMPLE_RATE, -16, 2))[2]
        if channels == 1:
            return pygame.mixer.Sound(buffer=samples)
        stereo = array.array("h")
        for s in samples:
            stereo.extend((s,) * channels)
        return pygame.mixer.Sound(buffer=stereo)

    def play_cue(self, kind: str) -> None:
        if not self._initialized:
            return
        sound = self._sounds.get(kind)
        if sound is None:
            logger.warning(f"Unknown cue: {kind}")
            return
        sound.play()

    def set_loop_enabled(self, enabled: bool) -> None:
        self.loop_enabled = bool(enabled)
        if not self._initialized or self._loop is None:
            return
        if enabled:
            if self._loop_channel is None or not self._loop_channel.get_busy():
                self._loop_channel = self._loop.play(loops=-1)
        elif self._loop_channel is not None:
            self._loop_channel.stop()
            self._loop_channel = None

    def close(self) -> None:
        if self._initialized:
            pygame.mixer.quit()
            self._initialized = False
