"""Sources of random 32-bit values for passphrase generation.

A source is used as a context manager: it is opened once, asked for one
value per word, and closed on every exit path. Short or failed reads are
fatal and never retried, so a passphrase is never built from partial data.
"""
import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

UINT32_SIZE = 4
DEFAULT_DEVICE = "/dev/urandom"


class EntropyError(Exception):
    """Base class for entropy source failures."""


class EntropySourceUnavailable(EntropyError):
    """The random source could not be opened."""

    def __init__(self, source: str, errno: Optional[int] = None):
        self.source = source
        self.errno = errno
        super().__init__(f"unable to open {source}")


class EntropyReadFailure(EntropyError):
    """A read from an opened random source failed or came back short."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"read from {source} failed: {reason}")


class RandomSource:
    """Produces uniformly distributed unsigned 32-bit values, or fails."""

    name = "random source"

    def open(self) -> None:
        pass

    def close(self) -> None:
        pass

    def read(self, size: int) -> bytes:
        raise NotImplementedError

    def next_uint32(self) -> int:
        data = self.read(UINT32_SIZE)
        if data is None or len(data) != UINT32_SIZE:
            got = 0 if data is None else len(data)
            raise EntropyReadFailure(
                self.name, f"short read ({got} of {UINT32_SIZE} bytes)"
            )
        return int.from_bytes(data, "little")

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False


class SystemRandomSource(RandomSource):
    """The operating system's secure random facility, via os.urandom."""

    name = "system random source"

    def read(self, size: int) -> bytes:
        try:
            return os.urandom(size)
        except NotImplementedError as e:
            raise EntropySourceUnavailable(self.name) from e
        except OSError as e:
            raise EntropyReadFailure(self.name, str(e)) from e


class DeviceRandomSource(RandomSource):
    """Reads raw bytes from a random device such as /dev/urandom."""

    def __init__(self, path: str = DEFAULT_DEVICE):
        self.path = path
        self.name = path
        self._device = None

    def open(self) -> None:
        try:
            self._device = open(self.path, "rb", buffering=0)
        except OSError as e:
            logger.debug(f"Failed to open {self.path}: {e}")
            raise EntropySourceUnavailable(self.path, e.errno) from e
        logger.debug(f"Opened random device {self.path}")

    def close(self) -> None:
        if self._device is not None:
            self._device.close()
            self._device = None

    def read(self, size: int) -> bytes:
        if self._device is None:
            raise EntropyReadFailure(self.path, "device is not open")
        try:
            return self._device.read(size)
        except OSError as e:
            raise EntropyReadFailure(self.path, str(e)) from e
