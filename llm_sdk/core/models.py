"""
Base classes shared by every request and response shape.

Requests and responses are frozen pydantic models. Serialization always drops
``None`` values, so an optional field that was never set does not show up on
the wire at all. Fields listed in ``omit_when_empty`` are dropped as well when
they hold an empty collection.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Tuple, Type

from pydantic import BaseModel, ConfigDict, model_serializer

from .exceptions import MissingFieldError


class ApiModel(BaseModel):
    """Base model with wire serialization helpers."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    omit_when_empty: ClassVar[Tuple[str, ...]] = ()

    @model_serializer(mode="wrap")
    def drop_empty_collections(self, handler):
        data = handler(self)
        if isinstance(data, dict):
            for key in self.omit_when_empty:
                if key in data and not data[key]:
                    del data[key]
        return data

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self, indent: int = None) -> str:
        return self.model_dump_json(exclude_none=True, indent=indent)


class RequestBuilder:
    """
    Fluent builder for a request model.

    Required fields may be passed to the constructor, every field (required or
    not) can be set through a setter named after it:

        req = ChatCompletionRequestBuilder(messages=msgs).temperature(0.2).build()

    ``build()`` only checks that required fields were supplied. Value ranges
    are left to the remote service.
    """

    target: ClassVar[Type[ApiModel]]

    def __init__(self, **fields: Any):
        self._fields: Dict[str, Any] = {}
        for name, value in fields.items():
            self._set(name, value)

    def _set(self, name: str, value: Any) -> "RequestBuilder":
        if name not in self.target.model_fields:
            raise AttributeError(f"{self.target.__name__} has no field {name!r}")
        self._fields[name] = value
        return self

    def __getattr__(self, name: str):
        if name.startswith("_") or name not in self.target.model_fields:
            raise AttributeError(name)

        def setter(value: Any) -> "RequestBuilder":
            return self._set(name, value)

        return setter

    def build(self) -> ApiModel:
        for name, field in self.target.model_fields.items():
            if field.is_required() and name not in self._fields:
                raise MissingFieldError(name)
        return self.target(**self._fields)
