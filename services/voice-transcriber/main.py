"""
Voice Transcriber Service.

Entry point for the voice message transcription service.
"""

from ddtrace import patch_all

from dependencies import get_worker

patch_all()


def main():
    """Starts the worker."""
    worker = get_worker()
    worker.start()


if __name__ == "__main__":
    main()
