from __future__ import annotations

import json
from typing import Any, List

from pydantic import BaseModel


def format_received(value: Any) -> str:
    """Render an offending input for an error message.

    Strings are double-quoted, everything else is compact JSON.
    """
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, BaseModel):
        value = value.model_dump()
    try:
        return json.dumps(value, separators=(",", ":"), default=str)
    except ValueError:
        # circular containers
        return repr(value)


class ColorValidationError(ValueError):
    """Raised when a color entry point rejects its input.

    Attributes:
        function_name: Name of the entry point that rejected the input
        message: Human-readable description of the first violation
        received_value: The offending input, unchanged
        issues: pydantic error dictionaries, empty for non-schema checks
    """

    def __init__(
        self,
        function_name: str,
        message: str,
        received_value: Any,
        issues: List[dict] | None = None,
    ) -> None:
        self.function_name = function_name
        self.message = message
        self.received_value = received_value
        self.issues = list(issues) if issues else []
        super().__init__(
            f"[{function_name}] {message}. Received: {format_received(received_value)}"
        )

    def __reduce__(self):
        return (
            self.__class__,
            (self.function_name, self.message, self.received_value, self.issues),
        )
