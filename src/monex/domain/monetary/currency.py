from __future__ import annotations


class Currency:
    """Represents a specific currency unit, identified by its code.

    The code is opaque: any non-blank string is accepted and kept exactly as given
    (no case folding, no trimming). "USD", "$" and "US Dollar" are all valid codes;
    pick whichever your domain uses.

    Attributes:
        code (str): Currency code (e.g., "USD", "BTC").
    """

    __slots__ = ("_code",)

    def __init__(self, code: str):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD", "BTC").

        Raises:
            ValueError: If $code is None, not a string, empty or whitespace only.
        """
        # Raise: $code must be a non-blank string
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        self._code = code

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return the raw currency code."""
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}')"
