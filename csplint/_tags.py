from __future__ import annotations

import re
from logging import getLogger
from typing import Iterable, Iterator

from . import _offense
from ._nodes import Tag
from ._registry import names


REX_JAVASCRIPT = re.compile('javascript.*')
logger = getLogger(__package__)


def scan_tags(tags: Iterable[Tag], custom_message: str = '') -> Iterator[_offense.Offense]:
    """Find inline event handlers and javascript links in markup tags.
    """
    for tag in tags:
        yield from tag_offenses(tag, custom_message)


def tag_offenses(tag: Tag, custom_message: str = '') -> Iterator[_offense.Offense]:
    if tag.closing:
        return
    yield from _check_events(tag, custom_message)
    # Only the lowercase tag name is checked, `<A href=...>` passes.
    if tag.name == 'a':
        yield from _check_href(tag, custom_message)


def _check_events(tag: Tag, custom_message: str) -> Iterator[_offense.Offense]:
    for event in names():
        attr = tag.get(event)
        if attr is None:
            continue
        if not attr.value:
            logger.debug(f'tag {tag.name}: empty {event} attribute skipped')
            continue
        yield _offense.build(
            attr.loc,
            _offense.EVENT_ATTRIBUTE,
            custom_message,
            event=event,
        )


def _check_href(tag: Tag, custom_message: str) -> Iterator[_offense.Offense]:
    attr = tag.get('href')
    if attr is None or not attr.value:
        return
    if REX_JAVASCRIPT.search(attr.value):
        yield _offense.build(
            attr.loc,
            _offense.JAVASCRIPT_HREF,
            custom_message,
            href=attr.value,
        )
