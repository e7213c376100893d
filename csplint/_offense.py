from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from ._nodes import Location


TEMPLATE = 'CSP{code:03}'

# event handler attribute on a tag
EVENT_ATTRIBUTE = 1
# javascript URL in a link
JAVASCRIPT_HREF = 2
# event handler in embedded code
EVENT_IN_CODE = 3


@dataclass(frozen=True)
class Offense:
    """A single violation of the Content Security Policy found in a template.

    Offenses are never autocorrected, the host should not expect a fix.
    """
    loc: Location
    message: str
    code: int

    @property
    def rule(self) -> str:
        """Short code of the violated rule, like ``CSP001``.
        """
        return TEMPLATE.format(code=self.code)


MESSAGES = MappingProxyType({
    EVENT_ATTRIBUTE: (
        'Usage of `{event}` event handler violates our Content Security Policy.\n'
        'Remove the `{event}` handler and refactor code using `script` tag'
    ),
    JAVASCRIPT_HREF: (
        'Usage of javascript URLs in a href="" violates our Content Security Policy.\n'
        'Replace href="{href}" with href="#" and refactor code using `script` tag'
    ),
    EVENT_IN_CODE: (
        'Usage of inline event handlers {events} violates our Content Security Policy.\n'
        'Remove the handler from the helper method and refactor code using a `script` block'
    ),
})


def build(
    loc: Location,
    code: int,
    custom_message: str = '',
    **details: str,
) -> Offense:
    """Make an offense with the full message for the given rule.

    The custom message, if any, goes first, on its own line.
    """
    message = MESSAGES[code].format(**details)
    if custom_message:
        message = f'{custom_message}\n{message}'
    return Offense(loc=loc, message=message, code=code)


def quote_events(events: list[str]) -> str:
    """Backquote each event name and join them with commas.
    """
    return ','.join(f'`{event}`' for event in events)
