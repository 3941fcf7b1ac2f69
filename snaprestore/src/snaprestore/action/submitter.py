"""Generic request submission shared by all request builders."""

import logging
from typing import Callable, Generic, TypeVar

from .listener import ActionListener, AsyncioListener, FutureListener

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")

SubmitFn = Callable[[RequestT, ActionListener[ResponseT]], None]


class ActionSubmitter(Generic[RequestT, ResponseT]):
    """
    Pairs a request with the single operation that executes it.

    Builders compose one of these instead of inheriting submit machinery.
    The submitter performs no validation; the submit function owns it.
    """

    def __init__(self, request: RequestT, submit: SubmitFn, action_name: str = ""):
        self.request = request
        self._submit = submit
        self.action_name = action_name or type(request).__name__

    def execute(self, listener: ActionListener[ResponseT]) -> None:
        """Hand the request to the submit function with ``listener``."""
        logger.debug("Submitting %s", self.action_name)
        self._submit(self.request, listener)

    def execute_future(self) -> FutureListener[ResponseT]:
        """Submit and return a future-backed listener to block on."""
        listener: FutureListener[ResponseT] = FutureListener()
        self.execute(listener)
        return listener

    async def execute_async(self) -> ResponseT:
        """Submit and await the response on the running event loop."""
        listener: AsyncioListener[ResponseT] = AsyncioListener()
        self.execute(listener)
        return await listener.future
