"""
Shared fixtures for exporter tests.
"""
import pytest

from tabexport.config import ExportSettings
from tabexport.print import ExportLogger


class RecordingEcho:
    """Collects messages passed to the logger's echo function."""

    def __init__(self):
        self.messages = []

    def __call__(self, message: str = "", err: bool = False) -> None:
        self.messages.append((message, err))

    @property
    def text(self) -> str:
        return "\n".join(message for message, _ in self.messages)

    @property
    def errors(self) -> list:
        return [message for message, err in self.messages if err]


@pytest.fixture
def echo():
    return RecordingEcho()


@pytest.fixture
def logger(echo):
    """Verbose logger writing into the recording echo."""
    return ExportLogger(verbose=True, echo=echo)


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return ExportSettings()


@pytest.fixture
def sample_json():
    return '[{"a":1,"b":"x"},{"a":2,"b":"y"}]'
