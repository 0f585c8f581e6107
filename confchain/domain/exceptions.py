"""Domain exceptions for confchain lookups.

Leaf providers raise the recoverable kinds (KeyNotFoundError,
TypeConversionError, ParsingError, UnknownConfigError). A chain recovers
them while scanning its members and raises ConfigUnresolvableError once
every member has failed. That terminal error should be caught at the
application boundary (CLI, service entry point) and turned into a
process exit with diagnostic output.
"""

from __future__ import annotations

from dataclasses import dataclass


class ConfigError(Exception):
    """Base exception for all configuration errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class KeyNotFoundError(ConfigError):
    """Raised when a key is absent from a provider's store."""

    def __init__(self, key: str) -> None:
        super().__init__(f"config value with key '{key}' could not be found")
        self.key = key


class TypeConversionError(ConfigError):
    """Raised when a raw value cannot be coerced to the requested type.

    Attributes:
        key: Key whose value failed conversion.
        value: The raw string value.
        type_name: Target type name ("float64" or "bool").
    """

    def __init__(self, key: str, value: str, type_name: str) -> None:
        super().__init__(
            f"value '{value}' of key '{key}' cannot be converted "
            f"to expected type '{type_name}'"
        )
        self.key = key
        self.value = value
        self.type_name = type_name


class ParsingError(ConfigError):
    """Raised when a line of a backing file is not of the form KEY=VALUE.

    Aborts the whole load; the store is never partially populated.
    """

    def __init__(
        self,
        line: str,
        path: str | None = None,
        line_number: int | None = None,
    ) -> None:
        message = f"could not parse line '{line}'"
        if path is not None and line_number is not None:
            message += f" ({path}:{line_number})"
        super().__init__(
            message,
            hint="Each line must have the form KEY=VALUE with exactly one '='",
        )
        self.line = line
        self.path = path
        self.line_number = line_number


class UnknownConfigError(ConfigError):
    """Wraps an I/O or decoding failure raised beneath the parser.

    Attributes:
        cause: The original exception, also available as __cause__.
    """

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(message)
        self.cause = cause
        self.__cause__ = cause


@dataclass(frozen=True)
class LookupAttempt:
    """One failed member lookup recorded during a chain scan.

    Attributes:
        position: Zero-based index of the member in the chain.
        provider: Short description of the member provider.
        error: The error the member raised.
    """

    position: int
    provider: str
    error: ConfigError


class ConfigUnresolvableError(ConfigError):
    """Raised when no provider in a chain could resolve a key.

    Represents a deployment or operator error rather than a runtime
    condition; hosts are expected to terminate on it.

    Attributes:
        key: The key that could not be resolved.
        type_name: Requested type ("string", "float64" or "bool").
        attempts: Every failed member lookup, in chain order.
    """

    def __init__(
        self,
        key: str,
        type_name: str,
        attempts: list[LookupAttempt],
        message: str | None = None,
    ) -> None:
        if message is None:
            message = f"config key '{key}' ({type_name}) could not be resolved"
            if attempts:
                last = attempts[-1]
                message += (
                    f": last error from provider #{last.position} "
                    f"({last.provider}): {last.error.message}"
                )
        super().__init__(
            message,
            hint=f"Provide '{key}' in one of the configured sources",
        )
        self.key = key
        self.type_name = type_name
        self.attempts = attempts

    def describe(self) -> str:
        """Render a multi-line diagnostic listing every failed attempt."""
        lines = [self.message]
        for attempt in self.attempts:
            lines.append(
                f"  #{attempt.position} {attempt.provider}: {attempt.error.message}"
            )
        return "\n".join(lines)


class NoProvidersConfiguredError(ConfigUnresolvableError):
    """Raised on lookup against a chain with no providers."""

    def __init__(self, key: str, type_name: str) -> None:
        super().__init__(
            key,
            type_name,
            [],
            message=(
                f"config key '{key}' ({type_name}) could not be resolved: "
                "no providers configured"
            ),
        )
        self.hint = "Configure at least one provider in the chain"
