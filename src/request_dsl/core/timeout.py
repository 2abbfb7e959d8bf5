"""
Timeout builder.
"""
from typing import Optional

from ..errors import ErrorMessage, PreconditionViolation, require
from ..models import Timeout


def _checked(value: Optional[int], message: ErrorMessage) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise PreconditionViolation(ErrorMessage.NON_INTEGER_TIMEOUT, repr(value))
    require(value > 0, message)
    return value


class TimeoutBuilder:
    """Timeouts in milliseconds. Assigning ``None`` clears a field."""

    def __init__(self, seed: Optional[Timeout] = None):
        seed = seed or Timeout()
        self._connect = seed.connect
        self._read = seed.read
        self._write = seed.write

    @property
    def connect(self) -> Optional[int]:
        return self._connect

    @connect.setter
    def connect(self, value: Optional[int]) -> None:
        self._connect = _checked(value, ErrorMessage.NON_POSITIVE_CONNECT_TIMEOUT)

    @property
    def read(self) -> Optional[int]:
        return self._read

    @read.setter
    def read(self, value: Optional[int]) -> None:
        self._read = _checked(value, ErrorMessage.NON_POSITIVE_READ_TIMEOUT)

    @property
    def write(self) -> Optional[int]:
        return self._write

    @write.setter
    def write(self, value: Optional[int]) -> None:
        self._write = _checked(value, ErrorMessage.NON_POSITIVE_WRITE_TIMEOUT)

    def build(self) -> Timeout:
        return Timeout(connect=self._connect, read=self._read, write=self._write)
