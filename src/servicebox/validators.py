from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from servicebox.exceptions import ArityMismatchError

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class ArityValidator:
    """Validates resolved dependency counts against routine signatures."""

    def validate(self, name: str, routine: Callable[..., Any], argument_count: int) -> None:
        """Raise ``ArityMismatchError`` when ``routine`` cannot take the arguments.

        Routines whose signature cannot be introspected (some builtins and C
        extension types) are accepted as is.
        """
        try:
            signature = inspect.signature(routine)
        except (TypeError, ValueError):
            return

        parameters = list(signature.parameters.values())
        positional = [param for param in parameters if param.kind in _POSITIONAL_KINDS]
        required = sum(1 for param in positional if param.default is inspect.Parameter.empty)
        # keyword-only parameters without defaults can never be satisfied positionally
        required_keyword_only = any(
            param.kind is inspect.Parameter.KEYWORD_ONLY
            and param.default is inspect.Parameter.empty
            for param in parameters
        )
        has_var_positional = any(
            param.kind is inspect.Parameter.VAR_POSITIONAL for param in parameters
        )

        maximum = None if has_var_positional else len(positional)
        if (
            required_keyword_only
            or argument_count < required
            or (maximum is not None and argument_count > maximum)
        ):
            raise ArityMismatchError(
                name,
                expected=self._describe(required, maximum),
                actual=argument_count,
            )

    def _describe(self, required: int, maximum: int | None) -> str:
        if maximum is None:
            return f"at least {required}"
        if maximum == required:
            return str(required)
        return f"{required} to {maximum}"
