from .application import ApplicationRead, ApplicationReceiptRead, ApplicationRequest, MessageResponse

__all__ = [
    "ApplicationRead",
    "ApplicationReceiptRead",
    "ApplicationRequest",
    "MessageResponse",
]
