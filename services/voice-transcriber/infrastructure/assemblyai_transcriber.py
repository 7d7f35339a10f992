"""AssemblyAI implementation of the TranscriptionService interface."""

import asyncio

import assemblyai as aai
from voicy_common import setup_logging

from domain.models import SanitizedChat, Transcription, TranscriptSegment
from exceptions import TranscriptionError

from .interfaces import TranscriptionService

logger = setup_logging()


def format_timecode(milliseconds: int) -> str:
    """Renders an offset as m:ss, e.g. 65000 -> '1:05'."""
    minutes, seconds = divmod(milliseconds // 1000, 60)
    return f"{minutes}:{seconds:02d}"


def language_code(chat: SanitizedChat) -> str | None:
    """
    Maps the chat's engine locale onto an AssemblyAI language code.

    Locales such as 'ru-RU' map to 'ru'; names the API does not understand
    (wit's 'english', 'russian' and so on) return None so that language
    detection is used instead.
    """
    code = chat.engine_language.split("-")[0].lower()
    return code if len(code) == 2 else None


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber):
        self._transcriber = transcriber

    async def transcribe(self, file_url: str, chat: SanitizedChat) -> Transcription:
        """
        Transcribes the file at ``file_url`` using AssemblyAI.

        The SDK call blocks while it polls for the result, so it runs in a
        worker thread. Sentences become segments, labelled with their start
        offset.
        """
        code = language_code(chat)
        if code:
            config = aai.TranscriptionConfig(language_code=code)
        else:
            config = aai.TranscriptionConfig(language_detection=True)

        try:
            transcript = await asyncio.to_thread(
                self._transcriber.transcribe, file_url, config
            )

            if transcript.status == aai.TranscriptStatus.error:
                raise TranscriptionError(file_url, transcript.error)

            if transcript.text is None:
                raise TranscriptionError(file_url, "Transcription returned no text")

            sentences = await asyncio.to_thread(transcript.get_sentences)
        except TranscriptionError:
            logger.warning(
                "AssemblyAI returned no transcription",
                extra={"chat_id": chat.id},
            )
            raise
        except Exception as e:
            logger.exception("AssemblyAI transcription failed")
            raise TranscriptionError(file_url, str(e) or None, cause=e) from e

        segments = [
            TranscriptSegment(timecode=format_timecode(s.start), text=s.text)
            for s in sentences
        ]

        logger.info(
            "Audio transcription successful",
            extra={"chat_id": chat.id, "segment_count": len(segments)},
        )
        return Transcription(
            segments=segments,
            duration=int(transcript.audio_duration or 0),
        )
