"""Exceptions for viewscope."""

from __future__ import annotations


class MissingDebugRepresentationError(AssertionError):
    """A record reference has no attached debug wrapper.

    Raised when resolving a non-None reference whose debug wrapper was never
    attached: either the engine skipped the attach step (e.g. dev mode was
    off when the record was created) or the reference is neither a View
    Record nor a Container Record.

    Attributes:
        obj_type: Type name of the offending reference
        message: Human-readable error message
    """

    def __init__(
        self,
        obj_type: str | None = None,
        message: str | None = None,
    ) -> None:
        self.obj_type = obj_type
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        msg = "Object does not have a debug representation."
        if self.obj_type:
            msg += f" (got {self.obj_type})"
        return msg
