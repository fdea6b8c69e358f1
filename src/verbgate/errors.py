"""verbgate exception hierarchy.

Only declaration-time problems raise. Resolving a method and checking it
against an allow-list is total: absent headers, empty allow-lists and
unknown verbs all map to a defined answer.
"""


class VerbgateError(Exception):
    """Base for all verbgate-specific errors."""


class ConfigurationError(VerbgateError):
    """Raised when a route or method declaration is invalid.

    Typically raised while handlers are decorated or routes are built,
    never while a request is being matched.
    """
