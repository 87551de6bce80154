"""Classification of call-site log arguments."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

_PRIMITIVE_TYPES = (str, bytes, int, float, bool, type(None))


class ArgumentKind(str, Enum):
    """Category a single log argument falls into."""

    ERROR = "error"
    OBJECT = "object"
    PRIMITIVE = "primitive"
    UNCLASSIFIABLE = "unclassifiable"


@dataclass(frozen=True)
class ClassifiedArgument:
    """A log argument tagged with its category."""

    kind: ArgumentKind
    value: Any

    @property
    def fields(self) -> Mapping[str, Any]:
        """Shallow field view of an object argument."""

        if self.kind is not ArgumentKind.OBJECT:
            raise TypeError(f"{self.kind.value} arguments carry no fields")

        if isinstance(self.value, Mapping):
            return self.value

        # Dataclass instances are read one level deep only
        return {
            field.name: getattr(self.value, field.name)
            for field in dataclasses.fields(self.value)
        }


def classify_argument(value: Any) -> ClassifiedArgument:
    """Tag ``value`` with the category used to place it in a record."""

    if isinstance(value, BaseException):
        return ClassifiedArgument(ArgumentKind.ERROR, value)

    if isinstance(value, Mapping) or _is_dataclass_instance(value):
        return ClassifiedArgument(ArgumentKind.OBJECT, value)

    if isinstance(value, _PRIMITIVE_TYPES):
        return ClassifiedArgument(ArgumentKind.PRIMITIVE, value)

    return ClassifiedArgument(ArgumentKind.UNCLASSIFIABLE, value)


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


__all__ = ["ArgumentKind", "ClassifiedArgument", "classify_argument"]
