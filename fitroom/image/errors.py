"""Error taxonomy for image encoding and generation.

Propagation policy:
    Errors are raised where detected and never retried or downgraded inside
    the library. Read failures (`OSError`) and transport failures (`requests`
    exceptions) are not wrapped.
"""


class FitroomError(Exception):
    """Base class for errors raised by fitroom itself."""


class MalformedInputError(FitroomError, ValueError):
    """A data URL or downloaded resource does not have the expected shape."""


class GenerationError(FitroomError, RuntimeError):
    """The service answered but did not produce a usable image."""


class BlockedRequestError(GenerationError):
    """The prompt was refused on policy grounds."""

    def __init__(self, reason, block_message=None):
        self.reason = reason
        self.block_message = block_message
        message = f"The request was blocked. Reason: {reason}."
        if block_message:
            message = f"{message} {block_message}"
        super().__init__(message)


class AbnormalTerminationError(GenerationError):
    """Generation stopped for a reason other than a normal stop."""

    def __init__(self, finish_reason):
        self.finish_reason = finish_reason
        super().__init__(
            f"Image generation stopped unexpectedly. Reason: {finish_reason}. "
            "This is usually related to safety settings."
        )


class NoImageProducedError(GenerationError):
    """The response carried no inline image data."""

    def __init__(self, text=None):
        self.text = text
        if text:
            detail = f'The model replied with text: "{text}"'
        else:
            detail = (
                "This can happen because of safety filters or when the request is "
                "too complex. Please try a different image."
            )
        super().__init__(f"The AI model did not return an image. {detail}")
