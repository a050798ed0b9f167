"""Shared plumbing for domain services."""

from contextlib import AbstractContextManager
from typing import Any, ClassVar

import logfire


class Service:
    """Base class for domain services.

    A service owns the rules that span an aggregate and its repositories
    (vote toggling, feed ranking, comment ownership). Its public operations
    run inside Logfire spans named ``<span_namespace>.<operation>``.
    """

    span_namespace: ClassVar[str] = "service"

    def _span(self, operation: str, **attributes: Any) -> AbstractContextManager[Any]:
        """Open a span for one operation of this service."""
        name = f"{self.span_namespace}.{operation}"
        return logfire.span(name, **attributes)
