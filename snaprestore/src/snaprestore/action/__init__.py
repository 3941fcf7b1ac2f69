"""Actions - requests, listeners and submission."""

from .indices_options import IndicesOptions
from .listener import ActionListener, AsyncioListener, CallbackListener, FutureListener, wrap
from .submitter import ActionSubmitter

__all__ = [
    "IndicesOptions",
    "ActionListener",
    "CallbackListener",
    "FutureListener",
    "AsyncioListener",
    "ActionSubmitter",
    "wrap",
]
