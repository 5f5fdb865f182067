"""Description of an error caught by a UI/framework layer."""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Optional, Union


@dataclass(frozen=True)
class UiErrorDetails:
    """Error payload handed over by the host's UI/framework error hook.

    Attributes:
        exception: Whatever the framework caught. Usually an exception, but
            frameworks may report arbitrary objects.
        stack: Traceback object or pre-rendered stack text.
        library: Optional name of the library that caught the error.
        context: Optional description of what was happening.
    """

    exception: Any
    stack: Union[TracebackType, str, None] = None
    library: Optional[str] = None
    context: Optional[str] = None

    def exception_as_string(self) -> str:
        """Render the exception (and stack, when available) as text."""

        exception = self.exception
        if isinstance(exception, BaseException):
            stack = self.stack if self.stack is not None else exception.__traceback__
            if isinstance(stack, str):
                text = "".join(traceback.format_exception_only(type(exception), exception)) + stack
            else:
                text = "".join(traceback.format_exception(type(exception), exception, stack))
        else:
            text = str(exception)
            if isinstance(self.stack, str):
                text = f"{text}\n{self.stack}"
            elif self.stack is not None:
                text = f"{text}\n{''.join(traceback.format_tb(self.stack))}"

        prefix = " ".join(part for part in (self.library, self.context) if part)
        return f"{prefix}: {text.rstrip()}" if prefix else text.rstrip()


__all__ = ["UiErrorDetails"]
