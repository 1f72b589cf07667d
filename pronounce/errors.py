"""Error kinds raised by the pronunciation pipeline.

Each error carries the HTTP status and the plain-text message the API
answers with, so the app maps every failure in a single handler.
"""


class PronounceError(Exception):
    status_code = 500
    message = "Internal error"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail


class FetchError(PronounceError):
    """Dictionary page could not be retrieved."""
    status_code = 502
    message = "Failed to fetch page"


class DownloadError(PronounceError):
    """Audio clip could not be downloaded."""
    status_code = 502
    message = "Failed to download audio"


class MergeError(PronounceError):
    """Media backend failed to concatenate the clips."""
    status_code = 500
    message = "Audio merge failed."


class NoAudioFound(PronounceError):
    """No pronunciation resolved for any word of the phrase."""
    status_code = 400
    message = "No audio found for any words."
