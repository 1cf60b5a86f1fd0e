"""Two-variant result type for store writes.

Store writes report their outcome as a value rather than an exception so
each call site decides what a failure means: the statistics update logs
and carries on, the record write turns a ``Failure`` into a
``StoreError``.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class Success(BaseModel):
    """The write was applied."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"

    @property
    def ok(self) -> bool:
        return True


class Failure(BaseModel):
    """The write was not applied; ``reason`` is for the log, not the caller."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    reason: str

    @property
    def ok(self) -> bool:
        return False


OperationResult = Union[Success, Failure]

SUCCESS = Success()
