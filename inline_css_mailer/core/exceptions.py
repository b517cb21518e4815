"""Exceptions raised while preparing outbound messages."""


class InlineCssError(RuntimeError):
    """Base class for every error raised by the inlining hook."""


class EngineFailure(InlineCssError):
    """Raised when the styling engine cannot inline or convert the HTML body."""


class MalformedExistingStructure(InlineCssError):
    """Raised when a message part does not have the shape the hook expects."""


class DeliveryError(InlineCssError):
    """Raised when the transport rejects a prepared message."""


__all__ = [
    "InlineCssError",
    "EngineFailure",
    "MalformedExistingStructure",
    "DeliveryError",
]
