from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterator


# Inline event handler attributes and the DOM interface of the event they get.
# https://www.w3schools.com/jsref/dom_obj_event.asp
EVENTS = MappingProxyType({
    'onchange': 'Event',
    'onclick': 'MouseEvent',
    'onabort': 'UiEvent',
    'onafterprint': 'Event',
    'onanimationend': 'AnimationEvent',
    'onanimationiteration': 'AnimationEvent',
    'onanimationstart': 'AnimationEvent',
    'onbeforeprint': 'Event',
    'onbeforeunload': 'UiEvent',
    'onblur': 'FocusEvent',
    'oncanplay': 'Event',
    'oncanplaythrough': 'Event',
    'oncontextmenu': 'MouseEvent',
    'oncopy': 'ClipboardEvent',
    'oncut': 'ClipboardEvent',
    'ondblclick': 'MouseEvent',
    'ondrag': 'DragEvent',
    'ondragend': 'DragEvent',
    'ondragenter': 'DragEvent',
    'ondragleave': 'DragEvent',
    'ondragover': 'DragEvent',
    'ondragstart': 'DragEvent',
    'ondrop': 'DragEvent',
    'ondurationchange': 'Event',
    'onended': 'Event',
    'onerror': 'ProgressEvent',
    'onfocus': 'FocusEvent',
    'onfocusin': 'FocusEvent',
    'onfocusout': 'FocusEvent',
    'onfullscreenchange': 'Event',
    'onfullscreenerror': 'Event',
    'onhashchange': 'HashChangeEvent',
    'oninput': 'InputEvent',
    'oninvalid': 'Event',
    'onkeydown': 'KeyboardEvent',
    'onkeypress': 'KeyboardEvent',
    'onkeyup': 'KeyboardEvent',
    'onload': 'UiEvent',
    'onloadeddata': 'Event',
    'onloadedmetadata': 'Event',
    'onloadstart': 'ProgressEvent',
    'onmessage': 'Event',
    'onmousedown': 'MouseEvent',
    'onmouseenter': 'MouseEvent',
    'onmouseleave': 'MouseEvent',
    'onmousemove': 'MouseEvent',
    'onmouseover': 'MouseEvent',
    'onmouseout': 'MouseEvent',
    'onmouseup': 'MouseEvent',
    'onmousewheel': 'WheelEvent',  # deprecated, use onwheel
    'onoffline': 'Event',
    'ononline': 'Event',
    'onopen': 'Event',
    'onpagehide': 'PageTransitionEvent',
    'onpageshow': 'PageTransitionEvent',
    'onpaste': 'ClipboardEvent',
    'onpause': 'Event',
    'onplay': 'Event',
    'onplaying': 'Event',
    'onpopstate': 'PopStateEvent',
    'onprogress': 'Event',
    'onratechange': 'Event',
    'onresize': 'UiEvent',
    'onreset': 'Event',
    'onscroll': 'UiEvent',
    'onsearch': 'Event',
    'onseeked': 'Event',
    'onseeking': 'Event',
    'onselect': 'UiEvent',
    'onshow': 'Event',
    'onstalled': 'Event',
    'onstorage': 'StorageEvent',
    'onsubmit': 'Event',
    'onsuspend': 'Event',
    'ontimeupdate': 'Event',
    'ontoggle': 'Event',
    'ontouchcancel': 'TouchEvent',
    'ontouchend': 'TouchEvent',
    'ontouchmove': 'TouchEvent',
    'ontouchstart': 'TouchEvent',
    'ontransitionend': 'TransitionEvent',
    'onunload': 'UiEvent',
    'onvolumechange': 'Event',
    'onwaiting': 'Event',
    'onwheel': 'WheelEvent',
})

NAMES: tuple[str, ...] = tuple(EVENTS)

# Longer names go first, so that at any position the longest name wins.
REX_EVENTS = re.compile(
    '(' + '|'.join(sorted(NAMES, key=len, reverse=True)) + ')',
    re.IGNORECASE | re.MULTILINE,
)

# Confirm a name at a position with the same case folding as REX_EVENTS.
REX_NAMES = MappingProxyType({
    name: re.compile(name, re.IGNORECASE) for name in NAMES
})


def names() -> tuple[str, ...]:
    """All known event handler attribute names, always in the same order.
    """
    return NAMES


def matcher() -> re.Pattern[str]:
    """Case-insensitive regex matching any of the known event names.
    """
    return REX_EVENTS


def is_event(name: str) -> bool:
    """Check if the name is exactly (case-sensitive) a known event handler attribute.
    """
    return name in EVENTS


def interface(name: str) -> str:
    """The name of DOM interface of the event the handler receives.
    """
    return EVENTS[name]


def find_all(text: str) -> frozenset[str]:
    """Find all event names that occur in the text.

    The match is a plain case-insensitive substring search, there are no
    word boundaries. So, ``xonclickx`` contains ``onclick``, and ``ondragstart``
    contains both ``ondragstart`` and ``ondrag``.
    """
    return frozenset(_iter_names(text))


def _iter_names(text: str) -> Iterator[str]:
    pos = 0
    while True:
        match = REX_EVENTS.search(text, pos)
        if match is None:
            return
        start = match.start()
        for name in NAMES:
            if REX_NAMES[name].match(text, start):
                yield name
        pos = start + 1
