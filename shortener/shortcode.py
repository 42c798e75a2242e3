"""Short code generation utilities."""

import string
import uuid
from typing import Optional


class ShortCodeGenerator:
    """Generate short codes for URLs."""

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9

    def __init__(self, default_length: int = 6):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
        """
        if not 1 <= default_length <= 20:
            raise ValueError("default_length must be between 1 and 20")
        self.default_length = default_length

    def generate(self) -> str:
        """Generate a code for an entry submitted without one."""
        return self.generate_from_uuid()

    def generate_from_uuid(self, length: Optional[int] = None) -> str:
        """Generate short code from a random UUID.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Short code based on UUID
        """
        length = length or self.default_length

        code = self._int_to_base62(uuid.uuid4().int)

        # Pad so the returned code is always exactly `length` long
        return code[:length].rjust(length, self.BASE62_CHARS[0])

    def _int_to_base62(self, num: int) -> str:
        """Convert integer to base62 string.

        Args:
            num: Integer to convert

        Returns:
            Base62 string
        """
        if num == 0:
            return self.BASE62_CHARS[0]

        result = []
        base = len(self.BASE62_CHARS)

        while num > 0:
            remainder = num % base
            result.append(self.BASE62_CHARS[remainder])
            num = num // base

        return ''.join(reversed(result))


def generate_shortcode(length: int = 6) -> str:
    """Generate a random alphanumeric shortcode."""
    return ShortCodeGenerator(default_length=length).generate()
