"""
Dispatch engine: drives one log call from level name to written line.

Every call moves through the same states, strictly in order:

    VALIDATING -> ASSEMBLING -> SERIALIZING -> WRITING -> DONE

and ends in FAILED when the level is unknown, a serializer faults, or (async
mode only) the sink rejects the write. A record is handed to the output stage
only once it is fully assembled, so a failed call never writes a partial
record.

Synchronous Mode:
    dispatch() runs the whole sequence before returning. Validation and
    serializer failures raise immediately.

Asynchronous Mode:
    dispatch_async() validates, assembles and serializes before returning,
    then returns an asyncio handle for the write. Every failure, including
    an invalid level, is delivered through that handle rather than raised.

Context Handling:
    Each key of the context mapping that has a registered serializer is
    serialized and merged at the path the serializer names. Keys without a
    serializer and keys whose value is None are skipped. The order in which
    distinct keys are serialized is not part of the contract.

Example:
    >>> engine = DispatchEngine(registry, assembler, output_stage)
    >>> engine.dispatch("/app/server.py", "info", "hello world")
    >>> handle = engine.dispatch_async("/app/server.py", "info", "hello")
    >>> await handle
"""

import asyncio
from typing import Any, Mapping, Optional

from logality.core.exceptions.custom_exceptions import (
    ConfigurationError,
    InvalidLevelError,
    SerializerError,
)
from logality.core.logging.logger import get_logger
from logality.core.severity import NOT_FOUND, rank_of
from logality.core.states import CallState
from logality.output.writer import OutputStage
from logality.record.assembler import LogRecord, RecordAssembler
from logality.serializers.base import normalize_result
from logality.serializers.registry import SerializerRegistry

logger = get_logger(__name__)

ContextBag = Optional[Mapping[str, Any]]


class DispatchEngine:
    """
    Orchestrates validation, assembly, serialization and output for a logger.

    The engine holds no per-call state. The registry and assembler are only
    read during a call, so one engine serves concurrent callers.
    """

    def __init__(
        self,
        registry: SerializerRegistry,
        assembler: RecordAssembler,
        output: OutputStage,
    ):
        self.registry = registry
        self.assembler = assembler
        self.output = output

    def _validate(self, level: str) -> int:
        rank = rank_of(level)
        if rank == NOT_FOUND:
            raise InvalidLevelError(
                "Invalid log level",
                error_code="INVALID_LEVEL",
                details={"level": level, "state": CallState.VALIDATING.value},
            )
        return rank

    def _serialize(self, record: LogRecord, context: ContextBag) -> None:
        if not context:
            return
        if not isinstance(context, Mapping):
            raise ConfigurationError(
                "Log context must be a mapping",
                error_code="INVALID_CONTEXT",
                details={
                    "context_type": type(context).__name__,
                    "state": CallState.SERIALIZING.value,
                },
            )

        for key, raw_value in context.items():
            serializer = self.registry.lookup(key)
            if serializer is None or raw_value is None:
                continue

            try:
                result = normalize_result(key, serializer(raw_value))
                self.assembler.merge_at(record, result.path, result.value)
            except Exception as e:
                logger.warning(
                    "Serializer failed",
                    key=key,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise SerializerError(
                    str(e),
                    error_code="SERIALIZER_FAILED",
                    details={
                        "key": key,
                        "error_type": type(e).__name__,
                        "state": CallState.SERIALIZING.value,
                    },
                ) from e

    def build_record(
        self,
        file_name: str,
        level: str,
        message: str,
        context: ContextBag = None,
    ) -> LogRecord:
        """
        Run the VALIDATING, ASSEMBLING and SERIALIZING states for one call.

        Returns:
            LogRecord: The fully assembled record

        Raises:
            InvalidLevelError: If ``level`` is not a severity name
            SerializerError: If a registered serializer faults
        """
        rank = self._validate(level)
        record = self.assembler.new_skeleton(level, rank, message, file_name)
        self._serialize(record, context)
        return record

    def dispatch(
        self,
        file_name: str,
        level: str,
        message: str,
        context: ContextBag = None,
    ) -> None:
        """Log synchronously; failures raise to the caller."""
        record = self.build_record(file_name, level, message, context)
        self.output.write(self.output.render(record))

    def dispatch_async(
        self,
        file_name: str,
        level: str,
        message: str,
        context: ContextBag = None,
    ) -> "asyncio.Future[None]":
        """
        Log asynchronously and return a handle completed by the sink write.

        Raises:
            ConfigurationError: If no event loop is running in this thread
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise ConfigurationError(
                "Async logging requires a running event loop",
                error_code="NO_EVENT_LOOP",
            ) from e

        try:
            record = self.build_record(file_name, level, message, context)
            line = self.output.render(record)
        except Exception as e:
            failed: "asyncio.Future[None]" = loop.create_future()
            failed.set_exception(e)
            return failed

        return loop.create_task(self.output.write_async(line))
