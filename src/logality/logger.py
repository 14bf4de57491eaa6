"""
Logality logger instances and bound loggers.

A ``Logality`` instance owns its configuration, its serializer registry and
the host metadata gathered when it was created. ``get()`` returns a
``BoundLogger`` whose source file is fixed at the moment it is created, so
each module should call ``get()`` once for itself and keep the result.

Example:
    >>> from logality import Logality
    >>> logality = Logality(app_name="api")
    >>> log = logality.get()
    >>> log.info("Server started", {"custom": {"port": 8080}})
    >>> log("warn", "Slow response", {"req": request})
    >>>
    >>> # Async mode: every call returns an awaitable handle
    >>> logality = Logality(app_name="api", async_mode=True)
    >>> log = logality.get()
    >>> await log.error("Payment failed", {"error": exc, "user": user})
"""

from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from logality.core.config.settings import Settings
from logality.core.config.validation import LoggerOptions
from logality.core.logging.logger import get_logger
from logality.dispatch.engine import ContextBag, DispatchEngine
from logality.output.renderers import CompactRenderer, PrettyRenderer
from logality.output.writer import OutputStage
from logality.record.assembler import RecordAssembler
from logality.record.system import (
    CallerResolver,
    HostMetadata,
    resolve_caller_location,
)
from logality.serializers.base import Serializer
from logality.serializers.registry import SerializerRegistry

logger = get_logger(__name__)


class Logality:
    """
    A configured JSON logger writing to a single sink.

    Args:
        app_name: Written to context.runtime.application
            (default: LOGALITY_APP_NAME or "Logality")
        wstream: Writable destination (default: process standard output)
        output: Callable receiving each rendered line instead of ``wstream``
        async_mode: Make log calls return awaitable handles
        pretty_print: Use the rich pretty renderer instead of compact JSON
        pretty_colors: Colour the pretty renderer's output
        serializers: Serializer overrides and additional keys
        caller_resolver: Returns the source file for ``get()``
        host_metadata: Fixed context.system values
        clock: Returns the current time for ``dt``
        settings: Environment defaults for unset options

    Raises:
        ConfigurationError: If the options fail validation
    """

    def __init__(
        self,
        app_name: Optional[str] = None,
        wstream: Optional[Any] = None,
        output: Optional[Callable[[str], Any]] = None,
        async_mode: Optional[bool] = None,
        pretty_print: Optional[bool] = None,
        pretty_colors: bool = True,
        serializers: Optional[Mapping[str, Serializer]] = None,
        caller_resolver: Optional[CallerResolver] = None,
        host_metadata: Optional[HostMetadata] = None,
        clock: Optional[Callable[[], datetime]] = None,
        settings: Optional[Settings] = None,
    ):
        self.options = LoggerOptions.build(
            settings=settings,
            app_name=app_name,
            wstream=wstream,
            output=output,
            async_mode=async_mode,
            pretty_print=pretty_print,
            pretty_colors=pretty_colors,
            serializers=dict(serializers) if serializers is not None else None,
        )
        self.registry = SerializerRegistry(self.options.serializers)
        self.host_metadata = host_metadata or HostMetadata.collect()
        self._resolve_caller = caller_resolver or resolve_caller_location

        if self.options.pretty_print:
            renderer = PrettyRenderer(colors=self.options.pretty_colors)
        else:
            renderer = CompactRenderer()

        self._engine = DispatchEngine(
            registry=self.registry,
            assembler=RecordAssembler(
                self.options.app_name, self.host_metadata, clock=clock
            ),
            output=OutputStage(
                renderer, wstream=self.options.wstream, output=self.options.output
            ),
        )

        logger.debug(
            "Logality instance created",
            app_name=self.options.app_name,
            async_mode=self.options.async_mode,
            pretty_print=self.options.pretty_print,
            serializers=sorted(self.registry.keys()),
        )

    @property
    def async_mode(self) -> bool:
        return self.options.async_mode

    def get(self) -> "BoundLogger":
        """
        Return a logger bound to the calling module's file.

        Do not share the returned logger across modules; its source file is
        resolved once, here.
        """
        return BoundLogger(self, self._resolve_caller())

    def log(
        self,
        file_name: str,
        level: str,
        message: str,
        context: ContextBag = None,
    ) -> Any:
        """
        Emit one record.

        Args:
            file_name: Source file of the call site
            level: One of the eight severity names
            message: Human-readable message
            context: Optional mapping of context keys to raw values

        Returns:
            None in synchronous mode; an awaitable ``asyncio`` handle in
            async mode

        Raises:
            InvalidLevelError: Unknown level (synchronous mode)
            SerializerError: A serializer faulted (synchronous mode)
        """
        if self.options.async_mode:
            return self._engine.dispatch_async(file_name, level, message, context)
        self._engine.dispatch(file_name, level, message, context)
        return None


class BoundLogger:
    """
    A Logality view with a fixed source file.

    Call it with an explicit level, or use the per-level shorthands.
    """

    def __init__(self, logality: Logality, file_name: str):
        self._logality = logality
        self.file_name = file_name

    def __call__(self, level: str, message: str, context: ContextBag = None) -> Any:
        return self._logality.log(self.file_name, level, message, context)

    def emergency(self, message: str, context: ContextBag = None) -> Any:
        return self("emergency", message, context)

    def alert(self, message: str, context: ContextBag = None) -> Any:
        return self("alert", message, context)

    def critical(self, message: str, context: ContextBag = None) -> Any:
        return self("critical", message, context)

    def error(self, message: str, context: ContextBag = None) -> Any:
        return self("error", message, context)

    def warn(self, message: str, context: ContextBag = None) -> Any:
        return self("warn", message, context)

    warning = warn

    def notice(self, message: str, context: ContextBag = None) -> Any:
        return self("notice", message, context)

    def info(self, message: str, context: ContextBag = None) -> Any:
        return self("info", message, context)

    def debug(self, message: str, context: ContextBag = None) -> Any:
        return self("debug", message, context)

    def __repr__(self) -> str:
        return f"BoundLogger(file_name={self.file_name!r})"
