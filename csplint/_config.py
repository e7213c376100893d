from __future__ import annotations

from typing import Any, Mapping

import pydantic

from ._errors import convert_errors


class Config(pydantic.BaseModel):
    """Configuration of the rule, as the host passes it.

    ::

        config = csplint.Config(custom_message='See the CSP guide in the wiki.')
        rule = csplint.CspInlineEvents(config)

    """
    model_config = pydantic.ConfigDict(extra='forbid', frozen=True)

    custom_message: str = ''
    """
    Text to put at the beginning of every offense message, on its own line.
    For example, a link to the project documentation about CSP.
    """

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> Config:
        """Validate config options coming from the host.

        Raises:
            ConfigError: if the options are invalid.
        """
        if raw is None:
            return cls()
        with convert_errors():
            return cls.model_validate(dict(raw))
