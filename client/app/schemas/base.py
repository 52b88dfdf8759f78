"""Shared base for the client-side JSON models."""

from datetime import UTC, datetime
from typing import Annotated, Any, Mapping

from pydantic import BaseModel, ConfigDict, PlainSerializer, ValidationInfo, field_validator


def _iso_millis(value: datetime) -> str:
    # millisecond precision, UTC as "Z", the form JS backends send
    if value.tzinfo is None:
        return value.isoformat(timespec="milliseconds")
    return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


WireDatetime = Annotated[datetime, PlainSerializer(_iso_millis, return_type=str, when_used="json")]


class ApiModel(BaseModel):
    """Immutable model parsed from, and serialised back to, API JSON.

    An explicit ``null`` for a field that has a default is treated the same as
    a missing key, so the default applies. Required fields still fail
    validation when ``null``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None or info.field_name is None:
            return value
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return value
        return field.get_default(call_default_factory=True)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]):
        return cls.model_validate(data)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

    def copy_with(self, **changes: Any):
        """Return a validated new instance with ``changes`` applied; the receiver is untouched.

        Keys are field names. Unknown names raise ``TypeError``; values of the
        wrong type raise ``ValidationError``.
        """
        fields = type(self).model_fields
        unknown = sorted(set(changes) - set(fields))
        if unknown:
            raise TypeError(f"{type(self).__name__}.copy_with() got unknown fields: {', '.join(unknown)}")
        values = {name: getattr(self, name) for name in fields}
        values.update(changes)
        return type(self).model_validate(values)


class QueryFilters(ApiModel):
    """Filter value objects that turn into query-string parameters."""

    def to_query_params(self) -> dict:
        params = {}
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value:
                params[field.alias or name] = value
        return params

    @property
    def has_filters(self) -> bool:
        return any(getattr(self, name) is not None for name in type(self).model_fields)

    def clear(self):
        return type(self)()
