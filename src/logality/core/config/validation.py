"""
Construction option validation for Logality.

A Logality instance is configured once, at construction. The options are
merged with the environment defaults from ``Settings`` and validated with a
frozen pydantic model so that a misconfigured logger fails when it is built
rather than on its first log call.

Validation Rules:
    - app_name must be a non-empty string
    - wstream, when given, must expose ``write``
    - output, when given, must be callable
    - serializer keys must be non-empty strings mapping to callables
    - a coroutine-function output requires async mode

Example:
    >>> options = LoggerOptions.build(app_name="api", async_mode=True)
    >>> options.async_mode
    True
    >>> LoggerOptions.build(serializers={"user": "nope"})
    Traceback (most recent call last):
    ...
    ConfigurationError: Invalid Logality options: ...
"""

import inspect
from typing import Any, Callable, Dict, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    field_validator,
    model_validator,
)

from logality.core.config.settings import Settings, get_settings
from logality.core.exceptions.custom_exceptions import ConfigurationError


class LoggerOptions(BaseModel):
    """
    Immutable configuration owned by a single Logality instance.

    Attributes:
        app_name: Value of context.runtime.application
        pretty_print: Select the pretty renderer instead of compact JSON
        pretty_colors: Emit ANSI colours from the pretty renderer
        async_mode: Return awaitable handles from log calls
        serializers: Caller overrides/extensions for the serializer registry
        wstream: Writable destination, ``None`` for process standard output
        output: Callable replacing the stream write, receives the rendered line
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    app_name: str = "Logality"
    pretty_print: bool = False
    pretty_colors: bool = True
    async_mode: bool = False
    serializers: Dict[str, Callable[..., Any]] = {}
    wstream: Optional[Any] = None
    output: Optional[Callable[..., Any]] = None

    @field_validator("app_name")
    @classmethod
    def validate_app_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("app_name must not be empty")
        return v

    @field_validator("serializers")
    @classmethod
    def validate_serializer_keys(
        cls, v: Dict[str, Callable[..., Any]]
    ) -> Dict[str, Callable[..., Any]]:
        for key in v:
            if not key.strip():
                raise ValueError("serializer keys must not be empty")
        return v

    @field_validator("wstream")
    @classmethod
    def validate_wstream(cls, v: Any) -> Any:
        if v is not None and not callable(getattr(v, "write", None)):
            raise ValueError("wstream must expose a write() method")
        return v

    @model_validator(mode="after")
    def validate_output_mode(self) -> "LoggerOptions":
        if (
            self.output is not None
            and not self.async_mode
            and inspect.iscoroutinefunction(self.output)
        ):
            raise ValueError("a coroutine output function requires async_mode")
        return self

    @classmethod
    def build(
        cls, settings: Optional[Settings] = None, **kwargs: Any
    ) -> "LoggerOptions":
        """
        Merge explicit options over environment defaults and validate them.

        Arguments left as ``None`` fall back to ``Settings``.

        Raises:
            ConfigurationError: If any option fails validation
        """
        settings = settings or get_settings()
        defaults = {
            "app_name": settings.APP_NAME,
            "pretty_print": settings.PRETTY_PRINT,
            "async_mode": settings.ASYNC_MODE,
        }
        values = {k: v for k, v in kwargs.items() if v is not None}
        for name, default in defaults.items():
            values.setdefault(name, default)

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid Logality options: {e}",
                error_code="INVALID_OPTIONS",
                details={"errors": e.errors(include_url=False)},
            ) from e
