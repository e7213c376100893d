from __future__ import annotations

from contextlib import contextmanager

from pydantic import ValidationError


class ConfigError(ValueError):
    """The rule configuration passed by the host is invalid.

    Possible causes:

    * An option has a wrong type, like a number for ``custom_message``.
    * An unknown option is passed. The rule supports only ``custom_message``.

    """


@contextmanager
def convert_errors():
    """Convert pydantic validation errors into csplint errors.
    """
    try:
        yield
    except ValidationError as exc:
        fields = ', '.join(
            '.'.join(str(part) for part in err['loc']) or '<root>'
            for err in exc.errors()
        )
        raise ConfigError(f'invalid config for fields: {fields}') from exc
