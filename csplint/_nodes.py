from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Mapping, Protocol, Sequence


@dataclasses.dataclass(frozen=True)
class Location:
    """A span in the template source.
    """

    start: int
    """Offset of the first character of the span."""

    end: int
    """Offset right after the last character of the span."""

    line: int | None = None
    """1-based line number of the span start, if the parser knows it."""

    column: int | None = None
    """0-based column of the span start, if the parser knows it."""

    def __post_init__(self) -> None:
        assert 0 <= self.start <= self.end


@dataclasses.dataclass(frozen=True)
class Attribute:
    """A tag attribute as written in the source.
    """
    name: str
    value: str | None
    """Raw attribute value. None for a bare attribute like ``<input disabled>``."""

    loc: Location
    """Location of the attribute value."""


@dataclasses.dataclass(frozen=True)
class Tag:
    """An opening or closing markup tag.

    Attributes are keyed literally, the way they are written in the source.
    """
    name: str
    attributes: Mapping[str, Attribute | None] = dataclasses.field(
        default_factory=lambda: MappingProxyType({}),
    )
    closing: bool = False

    def get(self, name: str) -> Attribute | None:
        """Get an attribute by its exact name.
        """
        return self.attributes.get(name)


@dataclasses.dataclass(frozen=True)
class CodeNode:
    """Code embedded into the template, like ``<%= link_to ... %>``.
    """

    indicator: str | None
    """
    The symbol after the opening delimiter: ``=`` for output,
    ``-`` or None for statements, ``#`` for comments.
    """

    code: str | None
    """Raw source of the expression. None if the parser couldn't extract it."""

    loc: Location
    """Location of the code, without delimiters."""


class DocumentLike(Protocol):
    @property
    def tags(self) -> Sequence[Tag]:
        raise NotImplementedError

    @property
    def code_nodes(self) -> Sequence[CodeNode]:
        raise NotImplementedError


@dataclasses.dataclass(frozen=True)
class Document:
    """A parsed template: all tags and all embedded code nodes in source order.

    ::

        doc = csplint.Document(tags=[...], code_nodes=[...])
        offenses = csplint.scan(doc)
    """
    tags: Sequence[Tag] = ()
    code_nodes: Sequence[CodeNode] = ()
