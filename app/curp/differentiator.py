"""
Random tail of the code: one uppercase letter and one digit.

Production-safe: the default source uses secrets, which is backed by the OS
CSPRNG and safe to share across concurrent requests.
"""

import secrets
import string
from typing import Protocol


class Differentiator(Protocol):
    def next_letter(self) -> str: ...

    def next_digit(self) -> str: ...


class SecretsDifferentiator:
    def next_letter(self) -> str:
        return secrets.choice(string.ascii_uppercase)

    def next_digit(self) -> str:
        return secrets.choice(string.digits)


default_differentiator = SecretsDifferentiator()


def get_differentiator() -> Differentiator:
    return default_differentiator
