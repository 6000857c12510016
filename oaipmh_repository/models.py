"""read-only views of the host platform's records, as handed to the formats
"""
from __future__ import annotations
import dataclasses
import enum


class ValueType(enum.Enum):
    LITERAL = 'literal'
    URI = 'uri'
    RESOURCE = 'resource'


@dataclasses.dataclass(frozen=True)
class Value:
    term: str
    value: str = ''
    type: ValueType = ValueType.LITERAL
    uri: str | None = None
    label: str | None = None
    language: str | None = None
    is_public: bool = True

    def __str__(self) -> str:
        if self.type is ValueType.URI:
            return self.uri or self.value
        if self.type is ValueType.RESOURCE:
            return self.uri or self.label or self.value
        return self.value


@dataclasses.dataclass(frozen=True)
class ResourceClass:
    vocabulary_prefix: str
    local_name: str
    label: str = ''

    @property
    def term(self) -> str:
        return f'{self.vocabulary_prefix}:{self.local_name}'


@dataclasses.dataclass(frozen=True)
class ItemSet:
    id: int
    title: str = ''


@dataclasses.dataclass
class Resource:
    id: int
    values: dict[str, list[Value]] = dataclasses.field(default_factory=dict)

    def value(self, term: str, include_all: bool = True) -> list[Value]:
        _values = self.values.get(term, [])
        return list(_values) if include_all else list(_values[:1])


@dataclasses.dataclass
class Media(Resource):
    filename: str = ''
    sha256: str | None = None
    original_url: str | None = None
    thumbnail_urls: dict[str, str] = dataclasses.field(default_factory=dict)

    def thumbnail_url(self, size: str) -> str | None:
        return self.thumbnail_urls.get(size)


@dataclasses.dataclass
class Item(Resource):
    media: list[Media] = dataclasses.field(default_factory=list)
    resource_class: ResourceClass | None = None
    item_sets: list[ItemSet] = dataclasses.field(default_factory=list)
