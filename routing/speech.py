"""
Speech I/O ports.

Speech capture and playback live in the front end (browser Web Speech API or
a desktop engine). This module holds the parts of that behaviour that do not
depend on the engine:
- Recognition settings and transcript assembly from interim/final results
- Voice preference heuristic
- Playback coordination: any in-flight speech is cancelled before new speech
  starts, so announcements never overlap

Engines plug in through the SpeechSynthesizer protocol.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from routing.models import ClassificationResult
from routing.session import WelcomeState

logger = logging.getLogger(__name__)

# Name fragments of voices that tend to sound smooth and female
PREFERRED_VOICE_HINTS: tuple[str, ...] = (
    "female", "woman", "susan", "samantha", "zoe", "lisa", "karen",
    "emma", "olivia", "lucy", "jenny", "amy", "victoria",
)


@dataclass(frozen=True)
class Voice:
    name: str
    lang: str

    @property
    def is_english(self) -> bool:
        return self.lang.lower().startswith("en")


@dataclass(frozen=True)
class UtteranceSettings:
    rate: float = 1.0
    pitch: float = 1.05
    volume: float = 1.0


@dataclass(frozen=True)
class RecognitionConfig:
    continuous: bool = True
    interim_results: bool = True
    lang: str = "en-US"


@dataclass(frozen=True)
class RecognitionSegment:
    """One recognition result as reported by the engine."""

    transcript: str
    is_final: bool


def assemble_transcript(segments: Iterable[RecognitionSegment]) -> str:
    """
    Combine recognition results into the text shown in the input bar.

    Final segments come first, followed by interim ones, each group in the
    order reported.
    """
    final_parts: list[str] = []
    interim_parts: list[str] = []
    for segment in segments:
        if segment.is_final:
            final_parts.append(segment.transcript)
        else:
            interim_parts.append(segment.transcript)
    return "".join(final_parts) + "".join(interim_parts)


def select_preferred_voice(voices: Sequence[Voice]) -> Voice | None:
    """
    Pick a voice for announcements.

    Preference order: English voice whose name contains a preferred hint,
    then any English voice, then None (engine default).
    """
    for voice in voices:
        name = voice.name.lower()
        if voice.is_english and any(hint in name for hint in PREFERRED_VOICE_HINTS):
            return voice
    for voice in voices:
        if voice.is_english:
            return voice
    return None


class SpeechSynthesizer(Protocol):
    """Text-to-speech engine. speak() must return without waiting for playback."""

    def available_voices(self) -> Sequence[Voice]:
        ...

    def speak(self, text: str, voice: Voice | None, settings: UtteranceSettings) -> None:
        ...

    def cancel(self) -> None:
        ...


class SpeechAnnouncer:
    """Speaks routing feedback through a SpeechSynthesizer."""

    def __init__(
        self,
        synthesizer: SpeechSynthesizer,
        settings: UtteranceSettings | None = None,
    ) -> None:
        self.synthesizer = synthesizer
        self.settings = settings or UtteranceSettings()

    def announce(self, text: str) -> bool:
        """
        Stop whatever is playing and speak text.

        Returns:
            False when text is blank (nothing is spoken, current playback continues)
        """
        if not text or not text.strip():
            return False

        self.synthesizer.cancel()
        voice = select_preferred_voice(self.synthesizer.available_voices())
        self.synthesizer.speak(text, voice, self.settings)

        logger.debug(f"Speaking {len(text)} characters | voice={voice.name if voice else 'default'}")
        return True

    def announce_result(self, result: ClassificationResult) -> bool:
        return self.announce(result.tts_message)

    def welcome(self, state: WelcomeState) -> bool:
        """Speak the welcome message if this session has not heard it yet."""
        message = state.welcome_message()
        if message is None:
            return False
        return self.announce(message)
