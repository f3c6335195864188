"""Service whose methods call each other through swappable function slots.

Q: how do you test a method B that calls a method A on the same object?

Instead of calling ``self._method_one_impl`` directly, ``Service`` keeps its
behaviors in plain instance attributes (``method_one``, ``method_two``).
The constructor binds them to the real ``_..._impl`` methods; tests assign
any callable with the same signature to replace them::

    service = Service()
    service.method_one = lambda text: text
    service.method_two()  # now runs the lambda instead of the real method one

No interface or abstract base class is involved.
"""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

METHOD_ONE_PREFIX = "This is my Method 1 being called! Input: "
METHOD_TWO_INPUT = "Method 1 called from Method 2"
FLOW_HEADER = "Func calls on myService struct:"
FIRST_CALL_INPUT = "first call"


class Service:
    """Holds its behaviors as reassignable function slots.

    Attributes:
        method_one: Slot taking a text input and returning text.
        method_two: Slot taking no input; its effect is only visible through
            the ``method_one`` slot it calls.
    """

    method_one: Callable[[str], str]
    method_two: Callable[[], None]

    def __init__(self, echo: Callable[[str], object] | None = print):
        """Bind every slot to its real implementation.

        Args:
            echo: Sink for the text produced by method one. Defaults to
                ``print``; pass None to keep output off stdout.
        """
        self.echo = echo

        # Defaults; tests may reassign these attributes freely.
        self.method_one = self._method_one_impl
        self.method_two = self._method_two_impl

    def _method_one_impl(self, input: str) -> str:
        output = METHOD_ONE_PREFIX + input
        logger.debug(f"method one produced: {output!r}")
        if self.echo is not None:
            self.echo(output)
        return output

    def _method_two_impl(self) -> None:
        # Goes through the slot, never _method_one_impl.
        self.method_one(METHOD_TWO_INPUT)


def normal_program_flow(service: Service) -> None:
    """Drive the service the way non-test code does.

    Calls ``method_one`` once directly and once indirectly through
    ``method_two``.
    """
    if service.echo is not None:
        service.echo(FLOW_HEADER)
    service.method_one(FIRST_CALL_INPUT)
    service.method_two()


__all__ = [
    "FIRST_CALL_INPUT",
    "FLOW_HEADER",
    "METHOD_ONE_PREFIX",
    "METHOD_TWO_INPUT",
    "Service",
    "normal_program_flow",
]
