"""
UserId Value Object - Identity of the authenticated caller.

User ids are issued by the identity provider and are opaque to this service
(e.g. "user-1"), so only emptiness is validated.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    value: str  # user_id claim from the bearer token

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value
