"""
hexseq - Data Models

Result types returned by conversions whose failure is an expected outcome.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .core.hexvalue import HexValue
from .errors import EncodingError


@dataclass(frozen=True)
class TextResult:
    """
    Outcome of a UTF-8 conversion.

    ``from_string`` and ``to_string`` return one of these instead of
    raising, because "these bytes are not text" is a normal answer when
    probing payloads.

    Example:
        result = to_string(payload)
        if result.success:
            print(result.value)
        else:
            print(f"binary payload: {result.error}")
    """
    success: bool
    value: Optional[Union[str, HexValue]] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: Union[str, HexValue]) -> "TextResult":
        return cls(success=True, value=value)

    @classmethod
    def failed(cls, error: str) -> "TextResult":
        return cls(success=False, error=error)

    def unwrap(self) -> Union[str, HexValue]:
        """
        Return the converted value.

        Raises:
            EncodingError: If the conversion failed.
        """
        if not self.success:
            raise EncodingError(f"UTF-8 conversion failed: {self.error}", reason="utf8")
        return self.value

    def value_or(self, default: Optional[Union[str, HexValue]] = None) -> Optional[Union[str, HexValue]]:
        """Converted value, or ``default`` on failure."""
        return self.value if self.success else default

    def __bool__(self) -> bool:
        return self.success
