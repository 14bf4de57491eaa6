"""
Output stage: render a finished record and hand it to the sink.

The sink is either an ``output`` callable, which receives the rendered line
and replaces the stream write, or a writable stream (default: process
standard output). Text streams receive ``str``; binary streams receive UTF-8
encoded bytes.

Write Modes:
    write():       Synchronous, fire-and-forget. The stream's own errors
                   propagate unchanged; nothing is awaited.
    write_async(): Awaited. An awaitable returned by ``write``/``output`` is
                   awaited, as is a ``drain()`` coroutine when the stream has
                   one (asyncio.StreamWriter). Any failure is raised as
                   OutputError carrying the original message.

No locking is added here: concurrent writes are ordered only as far as the
sink itself orders them.
"""

import inspect
import io
import sys
from typing import Any, Callable, Optional, Union

from logality.core.exceptions.custom_exceptions import OutputError
from logality.core.logging.logger import get_logger
from logality.core.states import CallState
from logality.output.renderers import CompactRenderer, PrettyRenderer
from logality.record.assembler import LogRecord

logger = get_logger(__name__)

Renderer = Union[CompactRenderer, PrettyRenderer]


def _is_binary(stream: Any) -> bool:
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(stream, "mode", None)
    return isinstance(mode, str) and "b" in mode


class OutputStage:
    """Renders records and writes them to one sink."""

    def __init__(
        self,
        renderer: Renderer,
        wstream: Optional[Any] = None,
        output: Optional[Callable[[str], Any]] = None,
    ):
        self.renderer = renderer
        self.wstream = wstream if wstream is not None else sys.stdout
        self.output = output
        self._binary = output is None and _is_binary(self.wstream)

    def render(self, record: LogRecord) -> str:
        return self.renderer.render(record)

    def _send(self, line: str) -> Any:
        if self.output is not None:
            return self.output(line)
        payload = line.encode("utf-8") if self._binary else line
        return self.wstream.write(payload)

    def write(self, line: str) -> None:
        """Write one rendered record without waiting on the sink."""
        self._send(line)
        if self.output is None:
            flush = getattr(self.wstream, "flush", None)
            if callable(flush):
                flush()

    async def write_async(self, line: str) -> None:
        """
        Write one rendered record and wait for the sink to accept it.

        Raises:
            OutputError: If the sink or output function fails
        """
        try:
            result = self._send(line)
            if inspect.isawaitable(result):
                await result

            if self.output is None:
                drain = getattr(self.wstream, "drain", None)
                if inspect.iscoroutinefunction(drain):
                    await drain()
        except Exception as e:
            logger.warning("Log sink write failed", error=str(e))
            raise OutputError(
                str(e),
                error_code="OUTPUT_FAILED",
                details={
                    "state": CallState.WRITING.value,
                    "error_type": type(e).__name__,
                },
            ) from e
