"""
Core protocols for PyVecMat.

These define structural interfaces the containers rely on. We use Protocol
(structural typing) rather than ABC (nominal typing) so that any object
with the right methods works, including standard library streams.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextSink(Protocol):
    """
    Minimal protocol for a destination of rendered text.

    Anything supporting sequential text writes satisfies it:
    io.StringIO, sys.stdout, files opened in text mode.
    """

    def write(self, text: str, /) -> object:
        """Append text to the sink."""
        ...
