from __future__ import annotations

from logging import getLogger
from typing import Any, Mapping, Sequence

from ._code import scan_code
from ._config import Config
from ._nodes import DocumentLike, Tag
from ._offense import Offense
from ._tags import scan_tags


logger = getLogger(__package__)


def scan(document: DocumentLike, custom_message: str = '') -> list[Offense]:
    """Find all Content Security Policy violations in the parsed template.

    Offenses for tags go first, in the order of tags, followed by offenses
    for embedded code, in the order of code nodes.
    """
    offenses = list(scan_tags(document.tags, custom_message))
    offenses.extend(scan_code(document.code_nodes, custom_message))
    return offenses


class CspInlineEvents:
    """The rule that forbids inline event handlers and javascript links.

    Inline event handlers on tags violate Content Security Policy.
    Caught in templates:

    * ``<a onclick="alert()">``
    * ``<a href="javascript:void(0)">``
    * ``<%= link_to "/url", onchange: "someFn()" %>``

    Handlers passed through custom view helpers defined elsewhere
    are not detected.

    ::

        rule = csplint.CspInlineEvents({'custom_message': 'See docs/csp.md'})
        for offense in rule.run(document):
            print(offense.loc.line, offense.rule, offense.message)

    """
    name = 'csp-inline-events'
    version = '0.1.0'
    config_schema = Config

    __slots__ = ('_config',)
    _config: Config

    def __init__(self, config: Config | Mapping[str, Any] | None = None) -> None:
        if not isinstance(config, Config):
            config = Config.from_mapping(config)
        self._config = config

    @property
    def config(self) -> Config:
        return self._config

    def run(self, document: DocumentLike) -> list[Offense]:
        offenses = scan(document, self._config.custom_message)
        logger.debug(f'{self.name}: {len(offenses)} offenses found')
        return offenses

    def tags(self, document: DocumentLike) -> Sequence[Tag]:
        return document.tags

    def autocorrect(self, document: DocumentLike, offense: Offense) -> None:
        """Offenses cannot be fixed automatically, it does nothing.
        """
        return None
