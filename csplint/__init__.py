"""Linter for inline event handlers in templates that violate Content Security Policy.
"""
from . import _registry as events
from ._checker import CspInlineEvents, scan
from ._code import scan_code
from ._config import Config
from ._errors import ConfigError
from ._nodes import Attribute, CodeNode, Document, DocumentLike, Location, Tag
from ._offense import MESSAGES, Offense
from ._tags import scan_tags


__version__ = '0.1.0'
__all__ = [
    # functions
    'scan',
    'scan_code',
    'scan_tags',

    # classes
    'Attribute',
    'CodeNode',
    'Config',
    'CspInlineEvents',
    'Document',
    'DocumentLike',
    'Location',
    'Offense',
    'Tag',

    # exceptions
    'ConfigError',

    # constants
    'MESSAGES',

    # modules
    'events',
]
