"""Gate configuration.

GateConfig is a frozen dataclass — immutable after creation, shareable
across threads, no string-key dict lookups. Header names are checked
here, so a bad name fails at startup instead of on a request.
"""

from dataclasses import dataclass

from verbgate.errors import ConfigurationError
from verbgate.overrides import OVERRIDE_HEADERS


def _check_header_name(name: object) -> str:
    if not isinstance(name, str) or not name.strip():
        msg = f"Override header names must be non-blank strings, got {name!r}."
        raise ConfigurationError(msg)
    try:
        name.encode("latin-1")
    except UnicodeEncodeError:
        msg = f"Override header name {name!r} is not latin-1 and can never appear on the wire."
        raise ConfigurationError(msg) from None
    return name


@dataclass(frozen=True, slots=True)
class GateConfig:
    """Method gate configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = GateConfig(honor_overrides=False)

    Raises ``ConfigurationError`` for a blank, non-string or non-latin-1
    override header name, or a bare string in place of the tuple.
    """

    # Override headers, checked in this order before the wire method
    override_headers: tuple[str, ...] = OVERRIDE_HEADERS

    # When False the wire method is always used
    honor_overrides: bool = True

    # Key under which the sorted allow-list appears in list_extra_info()
    extra_info_key: str = "HTTP_METHODS"

    def __post_init__(self) -> None:
        if isinstance(self.override_headers, str):
            msg = (
                "override_headers must be a sequence of header names, "
                f"not the string {self.override_headers!r}."
            )
            raise ConfigurationError(msg)
        headers = tuple(_check_header_name(name) for name in self.override_headers)
        object.__setattr__(self, "override_headers", headers)
