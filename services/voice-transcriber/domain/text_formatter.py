"""Builds display and storage text from transcript segments."""

from collections.abc import Iterable

from pydantic import BaseModel

from .models import Chat, SanitizedChat, TranscriptSegment

PROMO_TEXT = "Powered by [Todorant](https://todorant.com/?ref=voicy)"

DEFAULT_PROMO_EXEMPT_CHAT_IDS = frozenset(
    {
        -1001122726482,
        -1001140130398,
        -1001275987479,
        -1001128503769,
        -1001179199008,
        -1001260542215,
        -471839945,
        -499632766,
        -428387998,
        -483383014,
        -424820225,
        -453221176,
        -465403737,
    }
)


def is_ru_chat(chat: SanitizedChat) -> bool:
    """Whether the chat should get Russian-locale copy."""
    if chat.language == "ru":
        return True
    engine_language = chat.engine_language.lower()
    return engine_language.startswith("ru") or engine_language == "russian"


class PromoPolicy(BaseModel, frozen=True):
    """Which chats see the promo suffix and which text they see."""

    exempt_chat_ids: frozenset[int] = DEFAULT_PROMO_EXEMPT_CHAT_IDS
    texts: dict[str, str] = {"en": PROMO_TEXT, "ru": PROMO_TEXT}

    def is_exempt(self, chat_id: int) -> bool:
        return chat_id in self.exempt_chat_ids

    def text_for(self, chat: SanitizedChat) -> str:
        return self.texts["ru" if is_ru_chat(chat) else "en"]


class TextFormatter:
    """Formats transcript segments for delivery and storage."""

    def __init__(self, promo: PromoPolicy):
        self._promo = promo

    def format(self, segments: Iterable[TranscriptSegment], chat: Chat) -> str:
        """
        Builds the text shown to the chat.

        Args:
            segments: Ordered transcript segments.
            chat: Chat the text is delivered to.

        Returns:
            Timecoded or plain text, with the promo suffix for non-exempt
            chats when the text is not empty.
        """
        segments = list(segments)
        if chat.timecodes_enabled:
            text = self._with_timecodes(segments)
        else:
            text = self.aggregate(segments)
        return self.with_promo(text, chat)

    def aggregate(self, segments: Iterable[TranscriptSegment]) -> str:
        """Joins non-empty segment texts with '. ', without timecodes or promo."""
        texts = (segment.text.strip() for segment in segments)
        return ". ".join(text for text in texts if text)

    def with_promo(self, text: str, chat: Chat) -> str:
        if not text or self._promo.is_exempt(chat.id):
            return text
        return f"{text}\n{self._promo.text_for(chat)}"

    def _with_timecodes(self, segments: list[TranscriptSegment]) -> str:
        return "\n".join(f"{s.timecode}:\n{s.text}" for s in segments)
