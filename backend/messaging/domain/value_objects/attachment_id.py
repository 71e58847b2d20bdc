"""
AttachmentId Value Object - UUID wrapper for attachment identity.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class AttachmentId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Attachment ID cannot be empty")
        UUID(self.value)

    @classmethod
    def generate(cls) -> "AttachmentId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
