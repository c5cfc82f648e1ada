"""Rendering-related exceptions."""

from __future__ import annotations

from jsonexplain.exceptions.base import JsonExplainError


class MalformedResultError(JsonExplainError, ValueError):
    """Raised when a validation result tree violates the node/keyword contract."""


class UnsupportedKeywordError(MalformedResultError):
    """Raised when a failure keyword has no rendering rule."""

    def __init__(self, keyword: object) -> None:
        self.keyword = keyword
        super().__init__(f"no rendering rule for failure keyword {keyword!r}")


class MessageParamsError(JsonExplainError, KeyError):
    """Raised when message template parameters do not match the template."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
