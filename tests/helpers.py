from __future__ import annotations

from itertools import count

import csplint


_offsets = count(step=10)


def get_location() -> csplint.Location:
    start = next(_offsets)
    return csplint.Location(start, start + 5, line=1, column=start)


def make_tag(name: str, *, closing: bool = False, **attrs: str | None) -> csplint.Tag:
    attributes = {
        attr: csplint.Attribute(attr, value, get_location())
        for attr, value in attrs.items()
    }
    return csplint.Tag(name, attributes, closing=closing)


def make_code(code: str | None, indicator: str | None = '=') -> csplint.CodeNode:
    return csplint.CodeNode(indicator, code, get_location())
