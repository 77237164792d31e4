"""Cursor option models.

Architecture:
    Options are immutable Pydantic v2 models validated once, when a cursor is
    created. Numeric window settings are clamped by field validators, and the
    mutually exclusive end-of-iteration settings are collapsed into a single
    ``EndOfIteration`` variant so cursors never inspect option shapes while
    iterating.

Design Decisions:
    - Frozen models: options cannot change under a live cursor
    - arbitrary_types_allowed: handlers are plain callables
    - ``model_fields_set`` decides whether ``end_of_iteration_value`` was
      given, so ``None`` is a valid explicit terminal value
"""

from __future__ import annotations

import math
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, StrictBool, field_validator

from ..core.enums import EndPolicyKind

OptionsT = TypeVar("OptionsT", bound="CursorOptions")


@dataclass(frozen=True)
class EndOfIteration:
    """End-of-sequence policy with exactly one active variant.

    Attributes:
        kind: Which variant is active
        callback: Terminal-result factory (``CALLBACK`` only)
        value: Fixed terminal value (``VALUE`` only)
    """

    kind: EndPolicyKind
    callback: Callable[..., Any] | None = None
    value: Any = None

    @classmethod
    def from_callback(cls, callback: Callable[..., Any]) -> EndOfIteration:
        return cls(EndPolicyKind.CALLBACK, callback=callback)

    @classmethod
    def from_value(cls, value: Any) -> EndOfIteration:
        return cls(EndPolicyKind.VALUE, value=value)

    @classmethod
    def default(cls) -> EndOfIteration:
        return cls(EndPolicyKind.DEFAULT)


class CursorOptions(BaseModel):
    """Options shared by every directly constructed cursor.

    Attributes:
        handle_return: ``True`` to build early-stop results from the value
            passed to ``return_``; a callable to implement ``return_`` itself
        on_throw: Callable implementing ``throw``
    """

    handle_return: StrictBool | Callable[..., Any] = False
    on_throw: Callable[..., Any] | None = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def supports_return(self) -> bool:
        return self.handle_return is not False

    @property
    def supports_throw(self) -> bool:
        return self.on_throw is not None


class SequenceCursorOptions(CursorOptions):
    """Options for cursors over a fixed sequence.

    Attributes:
        start_index: First index to yield (clamped to >= 0)
        count: Window length; ``None`` means up to the end of the sequence
        on_end_of_iteration: Callable producing the terminal result
        end_of_iteration_value: Fixed terminal value
    """

    start_index: int = 0
    count: int | None = None
    on_end_of_iteration: Callable[..., Any] | None = None
    end_of_iteration_value: Any = None

    @field_validator("start_index", mode="before")
    @classmethod
    def clamp_start_index(cls, v: Any) -> int:
        """Clamp negative, non-numeric and NaN start indexes to 0."""
        if isinstance(v, bool) or not isinstance(v, int | float):
            return 0
        if math.isnan(v) or v < 0:
            return 0
        if math.isinf(v):
            return sys.maxsize
        return int(v)

    @field_validator("count", mode="before")
    @classmethod
    def normalize_count(cls, v: Any) -> int | None:
        """Treat non-numeric counts as absent and counts below 1 as an empty window."""
        if isinstance(v, bool) or not isinstance(v, int | float):
            return None
        if math.isnan(v) or v < 1:
            return 0
        if math.isinf(v):
            return None
        return math.ceil(v)

    @property
    def end_of_iteration(self) -> EndOfIteration:
        """The active end-of-sequence policy; the callback wins over the value."""
        if self.on_end_of_iteration is not None:
            return EndOfIteration.from_callback(self.on_end_of_iteration)
        if "end_of_iteration_value" in self.model_fields_set:
            return EndOfIteration.from_value(self.end_of_iteration_value)
        return EndOfIteration.default()

    def window(self, length: int) -> tuple[int, int]:
        """Return the ``[start, stop)`` index range for a sequence of ``length``."""
        stop = length if self.count is None else min(self.start_index + self.count, length)
        return self.start_index, stop


def coerce_options(
    model: type[OptionsT],
    options: CursorOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> OptionsT:
    """Build ``model`` from an options instance, a mapping, and/or keyword overrides.

    Only explicitly set fields are carried over from an existing instance, so
    an unset ``end_of_iteration_value`` stays unset. Field values are carried
    over as-is, not serialized.
    """
    if options is None:
        data: dict[str, Any] = {}
    elif isinstance(options, BaseModel):
        if isinstance(options, model) and not overrides:
            return options
        data = {name: getattr(options, name) for name in options.model_fields_set}
    else:
        data = dict(options)
    data.update(overrides)
    return model.model_validate(data)
