from __future__ import annotations

from logging import getLogger
from typing import Iterable, Iterator

from . import _offense
from ._nodes import CodeNode
from ._registry import find_all, names


logger = getLogger(__package__)


def scan_code(
    nodes: Iterable[CodeNode],
    custom_message: str = '',
) -> Iterator[_offense.Offense]:
    """Find event handler names in the code embedded into the template.

    Helpers like ``link_to "/", onclick: "go()"`` render the handler
    as a tag attribute, and so are not allowed either. Both output
    and non-output code is checked, the indicator is ignored.
    """
    for node in nodes:
        if node.code is None:
            logger.debug(f'code node at {node.loc.start}: no code, skipped')
            continue
        found = find_all(node.code)
        if not found:
            continue
        events = [event for event in names() if event in found]
        yield _offense.build(
            node.loc,
            _offense.EVENT_IN_CODE,
            custom_message,
            events=_offense.quote_events(events),
        )
