"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from collections import OrderedDict
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field


class Field:
    """A name-value pair representing a single HTTP header.

    A field may carry several values when the same header name was supplied
    more than once.
    """

    def __init__(self, *, name: str, values: Iterable[str] | None = None):
        self.name = name
        self.values: list[str] = list(values) if values is not None else []

    def add(self, value: str) -> None:
        """Append a value to the field."""
        self.values.append(value)

    def set(self, values: list[str]) -> None:
        """Overwrite existing field values."""
        self.values = values

    def as_string(self, delimiter: str = ",") -> str:
        """Get delimited string of all values."""
        return delimiter.join(self.values)

    def as_tuples(self) -> list[tuple[str, str]]:
        return [(self.name, value) for value in self.values]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return False
        return self.name == other.name and self.values == other.values

    def __repr__(self) -> str:
        return f"Field(name={self.name!r}, values={self.values!r})"


class Fields:
    """A case-insensitive collection of :class:`Field` objects."""

    def __init__(self, initial: Iterable[Field] | None = None):
        self.entries: OrderedDict[str, Field] = OrderedDict()
        for fld in initial or ():
            self.set_field(fld)

    @classmethod
    def from_mapping(cls, headers: Mapping[str, str] | None = None) -> "Fields":
        headers = headers or {}
        return cls(Field(name=name, values=[value]) for name, value in headers.items())

    def set_field(self, field: Field) -> None:
        """Set a field, replacing any existing field of the same name."""
        self.entries[self._normalize_field_name(field.name)] = field

    def get_field(self, name: str) -> Field:
        return self.entries[self._normalize_field_name(name)]

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the comma-joined value of a field, or ``default``."""
        fld = self.entries.get(self._normalize_field_name(name))
        if fld is None:
            return default
        return fld.as_string()

    def add(self, name: str, value: str) -> None:
        """Append a value, creating the field if it does not exist yet."""
        key = self._normalize_field_name(name)
        if key in self.entries:
            self.entries[key].add(value)
        else:
            self.entries[key] = Field(name=name, values=[value])

    def remove_field(self, name: str) -> None:
        del self.entries[self._normalize_field_name(name)]

    def _normalize_field_name(self, name: str) -> str:
        return name.lower()

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._normalize_field_name(key) in self.entries

    def __getitem__(self, name: str) -> Field:
        return self.get_field(name)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fields):
            return False
        return self.entries == other.entries

    def __repr__(self) -> str:
        return f"Fields({list(self.entries.values())!r})"


@dataclass(kw_only=True, frozen=True)
class URI:
    """Universal Resource Identifier, target location for a :class:`S3Request`."""

    scheme: str = "https"
    host: str
    port: int | None = None
    path: str | None = None
    query: str | None = None
    fragment: str | None = None

    @property
    def netloc(self) -> str:
        """Construct netloc string in format ``{host}:{port}``."""
        if self.port is not None:
            return f"{self.host}:{self.port}"
        return self.host

    def build(self) -> str:
        """Construct the URL string this URI represents."""
        url = f"{self.scheme}://{self.netloc}{self.path or '/'}"
        if self.query:
            url += f"?{self.query}"
        if self.fragment:
            url += f"#{self.fragment}"
        return url


@dataclass(kw_only=True)
class S3Request:
    """HTTP request destined for an S3-compatible service.

    ``fields`` is mutated in place while the request is prepared and signed.
    The body is owned by the caller and only read for its length.
    """

    destination: URI
    method: str
    body: Iterable[bytes] | None = None
    fields: Fields = field(default_factory=Fields)
