"""Procedural sound generation and playback helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
import pygame

from config import settings_data
from logging_utils import log_debug


@dataclass(frozen=True)
class SoundSpec:
    """Configuration for a procedurally generated sound."""

    frequency: int
    duration: float
    volume: float
    waveform: str = "sine"


# (frequency, amplitude) chords played back to back, looped as background music
MUSIC_MOTIF: Sequence[Sequence[Tuple[int, float]]] = (
    ((196, 0.7), (392, 0.3)),
    ((246, 0.7), (493, 0.3)),
    ((220, 0.7), (440, 0.3)),
    ((262, 0.7), (523, 0.3)),
)


class SoundManager:
    """Generate and play custom sounds for game events.

    Every failure (no mixer, synthesis error, playback rejected) is logged and
    swallowed; the game never stops because of audio.
    """

    SAMPLE_RATE = 44_100

    def __init__(self, enable_audio: bool = True) -> None:
        self.sound_specs: Dict[str, SoundSpec] = {
            "shoot": SoundSpec(frequency=900, duration=0.08, volume=0.35, waveform="triangle"),
            "pickup": SoundSpec(frequency=660, duration=0.25, volume=0.5),
            "coin": SoundSpec(frequency=1_320, duration=0.12, volume=0.45),
            "explosion": SoundSpec(frequency=0, duration=0.5, volume=0.6, waveform="noise"),
            "game_over": SoundSpec(frequency=180, duration=0.6, volume=0.6),
        }
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self.music: Optional[pygame.mixer.Sound] = None
        self._music_channel: Optional[pygame.mixer.Channel] = None
        self.enabled = False

        if enable_audio:
            try:
                if not pygame.mixer.get_init():
                    pygame.mixer.init()
                pygame.mixer.set_num_channels(max(8, len(self.sound_specs) + 1))
                self.enabled = True
            except pygame.error as exc:
                log_debug(f"SoundManager mixer init failed: {exc}")
                self.enabled = False
        if self.enabled:
            log_debug("SoundManager initialising procedural sounds")
            self._prepare_sounds()
        else:
            log_debug("SoundManager running without audio output")

    def _prepare_sounds(self) -> None:
        try:
            for key, spec in self.sound_specs.items():
                self.sounds[key] = self._create_sound(spec)
                log_debug(f"Prepared sound '{key}' with spec {spec}")
            self.music = self._to_sound(self._music_wave())
        except (RuntimeError, pygame.error) as exc:
            log_debug(f"Failed to prepare sounds: {exc}")
            self.enabled = False
            self.sounds.clear()
            self.music = None
            return
        self.apply_settings()

    def _wave(self, spec: SoundSpec) -> np.ndarray:
        sample_count = max(1, int(self.SAMPLE_RATE * spec.duration))
        if spec.waveform == "noise":
            wave = np.random.uniform(-1.0, 1.0, sample_count)
            return wave * np.linspace(1.0, 0.0, sample_count)
        times = np.linspace(0, spec.duration, sample_count, endpoint=False, dtype=np.float32)
        if spec.waveform == "triangle":
            cycle = (times * spec.frequency) % 1
            return 4 * np.abs(cycle - 0.5) - 1
        return np.sin(2 * np.pi * spec.frequency * times)

    def _music_wave(self, note_length: float = 1.0) -> np.ndarray:
        sample_count = int(self.SAMPLE_RATE * note_length)
        times = np.linspace(0, note_length, sample_count, endpoint=False)
        fade = np.ones(sample_count)
        fade_samples = int(self.SAMPLE_RATE * 0.2)
        fade[-fade_samples:] = np.linspace(1.0, 0.0, fade_samples)
        notes = []
        for chord in MUSIC_MOTIF:
            wave = sum(amp * np.sin(2 * np.pi * freq * times) for freq, amp in chord)
            notes.append(wave / np.max(np.abs(wave)) * fade)
        return np.tile(np.concatenate(notes), 2)

    def _to_sound(self, wave: np.ndarray) -> pygame.mixer.Sound:
        audio = np.stack((wave, wave), axis=1)
        int_audio = np.ascontiguousarray((audio * 32_767).astype(np.int16))
        return pygame.sndarray.make_sound(int_audio)

    def _create_sound(self, spec: SoundSpec) -> pygame.mixer.Sound:
        sound = self._to_sound(self._wave(spec))
        sound.set_volume(spec.volume)
        return sound

    def apply_settings(self) -> None:
        sfx_volume = float(settings_data.get("SOUND_SFX_VOLUME", 0.7))
        for key, sound in self.sounds.items():
            sound.set_volume(self.sound_specs[key].volume * sfx_volume)
        if self.music is not None:
            self.music.set_volume(float(settings_data.get("SOUND_MUSIC_VOLUME", 0.5)))

    def play(self, key: str) -> None:
        if not self.enabled:
            return
        sound = self.sounds.get(key)
        if sound is None:
            log_debug(f"Sound '{key}' not found")
            return
        try:
            sound.play()
        except pygame.error as exc:
            log_debug(f"Playing sound '{key}' failed: {exc}")

    def play_music(self) -> None:
        if not self.enabled or self.music is None:
            return
        if self._music_channel is not None and self._music_channel.get_busy():
            return
        try:
            self._music_channel = self.music.play(loops=-1)
            log_debug("Started background music")
        except pygame.error as exc:
            log_debug(f"Starting music failed: {exc}")

    def pause_music(self) -> None:
        if self._music_channel is not None:
            self._music_channel.pause()

    def resume_music(self) -> None:
        if self._music_channel is not None:
            self._music_channel.unpause()

    def stop_music(self) -> None:
        if self._music_channel is not None:
            self._music_channel.stop()
            self._music_channel = None
            log_debug("Stopped background music")
