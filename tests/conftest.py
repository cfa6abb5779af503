import pytest

from mkpasswd.entropy import EntropySourceUnavailable, RandomSource


class ScriptedRandomSource(RandomSource):
    """Yields the given 32-bit values in order, then runs dry."""

    name = "scripted source"

    def __init__(self, values):
        self.values = list(values)
        self.opened = False
        self.closed = False

    def open(self):
        self.opened = True

    def close(self):
        self.closed = True

    def read(self, size):
        if not self.values:
            return b""
        return self.values.pop(0).to_bytes(size, "little")


class UnavailableRandomSource(RandomSource):
    name = "/dev/missing"

    def __init__(self, errno=2):
        self.errno = errno

    def open(self):
        raise EntropySourceUnavailable(self.name, self.errno)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("MKPASSWD_CONFIG", raising=False)
    monkeypatch.delenv("MKPASSWD_LOG_LEVEL", raising=False)


@pytest.fixture
def use_source(monkeypatch):
    """Replace the system source used by the generator with the given one."""

    def install(source):
        monkeypatch.setattr("mkpasswd.passphrase.SystemRandomSource", lambda: source)
        return source

    return install
