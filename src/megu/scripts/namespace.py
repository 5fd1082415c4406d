"""
Namespace identifiers.

A namespace is a ``prefix:suffix`` pair used for drop types, pool keys and
extension targets. When no prefix is written the ``minecraft`` prefix is
assumed.
"""

import re
from dataclasses import dataclass

from .errors import InvalidNamespace, TooManyColons
from .models import DEFAULT_PREFIX

NAMESPACE_PATTERN = re.compile(r"[a-z0-9:/_-]+")


@dataclass(frozen=True)
class Namespace:
    """Validated ``prefix:suffix`` identifier.

    The constructor performs no checks; use ``Namespace.decode`` for
    anything that comes from a script.
    """

    prefix: str
    suffix: str

    @classmethod
    def decode(cls, value: str) -> "Namespace":
        """Decode a namespace string.

        Args:
            value: Raw string such as ``"minecraft:stone"`` or ``"stone"``

        Returns:
            The decoded namespace

        Raises:
            InvalidNamespace: If the string contains characters outside
                ``[a-z0-9:/_-]`` or is empty
            TooManyColons: If the string contains more than one ``:``
        """
        if not isinstance(value, str) or not NAMESPACE_PATTERN.fullmatch(value):
            raise InvalidNamespace(str(value))

        colons = value.count(":")
        if colons > 1:
            raise TooManyColons(value)

        if colons == 1:
            prefix, suffix = value.split(":")
            return cls(prefix, suffix)

        return cls(DEFAULT_PREFIX, value)

    def __str__(self) -> str:
        return f"{self.prefix}:{self.suffix}"
