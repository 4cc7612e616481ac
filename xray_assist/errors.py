"""Error taxonomy for ingestion, analysis and start-up."""


class XRayAssistError(Exception):
    """Base for every error the session turns into display state."""


class UnsupportedMediaType(XRayAssistError):
    def __init__(self, media_type: str) -> None:
        super().__init__(media_type)
        self.media_type = media_type


class EncodingFailure(XRayAssistError):
    """Reading or encoding the selected file failed. Raised before any network call."""


ReadError = EncodingFailure


class ServiceFailure(XRayAssistError):
    """The external model call failed: network, auth, quota or malformed response."""


class UnknownFailure(XRayAssistError):
    """Anything raised during analysis that is not one of the kinds above."""


class PreviewReleased(XRayAssistError):
    pass


class MissingCredential(XRayAssistError, ValueError):
    """No service credential configured. Fatal at start-up."""
