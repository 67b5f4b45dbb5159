"""Display name to identifier normalization only"""
from typing import FrozenSet, Iterable, Optional

from fsentry.core.exceptions import BadNameError

MAX_IDENTIFIER_LENGTH = 200

# Device names rejected by Windows regardless of extension
RESERVED_NAMES: FrozenSet[str] = frozenset(
    {"con", "prn", "aux", "nul"}
    | {f"com{i}" for i in range(10)}
    | {f"lpt{i}" for i in range(10)}
)

_DIGITS = frozenset("0123456789")


class IdentifierNormalizer:
    """Turns user supplied names into filesystem safe identifiers"""

    def __init__(
        self,
        max_length: int = MAX_IDENTIFIER_LENGTH,
        extra_reserved: Optional[Iterable[str]] = None,
    ):
        self.max_length = max_length
        self.reserved_names = RESERVED_NAMES | frozenset(
            name.lower() for name in (extra_reserved or ())
        )

    def normalize(self, name: str) -> str:
        """
        Derive the identifier for a display name

        Args:
            name: Original name as given by the caller

        Returns:
            Identifier, or an empty string if the name cannot be used
        """
        lowered = name.lower().replace(" ", "_")
        result = "".join(
            ch for ch in lowered if ch.isalpha() or ch in _DIGITS or ch == "_"
        )
        result = result[: self.max_length]
        if result in self.reserved_names:
            return ""
        return result

    def require(self, name: str) -> str:
        """Normalize a name, raising BadNameError when it is unusable"""
        identifier = self.normalize(name)
        if not identifier:
            raise BadNameError(name)
        return identifier

    def is_reserved(self, identifier: str) -> bool:
        return identifier in self.reserved_names


_default_normalizer = IdentifierNormalizer()


def name_to_id(name: str) -> str:
    """Normalize with the default table and length limit"""
    return _default_normalizer.normalize(name)
