from dataclasses import dataclass


@dataclass(frozen=True)
class Binary:
    """Raw bytes stored without any metadata envelope"""

    id: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)
