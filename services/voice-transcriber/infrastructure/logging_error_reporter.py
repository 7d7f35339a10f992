"""Error reporter that writes failures to the structured log and trace."""

from ddtrace.trace import tracer
from voicy_common import setup_logging

from domain.models import MediaMessage, Phase

from .interfaces import ErrorReporter

logger = setup_logging()


class LoggingErrorReporter(ErrorReporter):
    """Logs pipeline failures and marks the active trace span as errored."""

    def report(self, media: MediaMessage, error: BaseException, phase: Phase) -> None:
        try:
            logger.error(
                "Voice message failed",
                exc_info=(type(error), error, error.__traceback__),
                extra={
                    "phase": phase.value,
                    "chat_id": media.chat_id,
                    "message_id": media.message_id,
                    "file_id": media.attachment.file_id,
                    "error_type": type(error).__name__,
                },
            )
            span = tracer.current_span()
            if span is not None:
                span.set_tag("voicy.phase", phase.value)
                span.set_exc_info(type(error), error, error.__traceback__)
        except Exception:
            logger.exception("Error reporting failed", extra={"phase": phase.value})
