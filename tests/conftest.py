"""Pytest configuration and fixtures for optclaim tests"""
import io
import logging

import pytest

from optclaim.core.colors import ConsoleColors
from optclaim.core.config import ParserSetting
from optclaim.core.logging import PACKAGE_LOGGER_NAME
from optclaim.parsing.files import FileSystem
from optclaim.parsing.parser import OptionParser
from optclaim.parsing.system import ProcessEnvironment


@pytest.fixture(autouse=True)
def plain_console():
    """Keep diagnostics free of ANSI codes regardless of the test terminal"""
    ConsoleColors.force(False)
    yield
    ConsoleColors.force(None)


@pytest.fixture
def environment():
    """A process environment writing to buffers and exiting via SystemExit"""
    return ProcessEnvironment(
        arguments=lambda: ["/usr/local/bin/prog", "--from-argv"],
        stdout=io.StringIO(),
        stderr=io.StringIO(),
        program_name="prog",
    )


@pytest.fixture
def make_parser(environment):
    """Build an OptionParser that raises ParserError instead of exiting"""

    def _make(*options, settings=(), **kwargs):
        return OptionParser(
            *options,
            settings=[ParserSetting.THROWS_ERRORS, *settings],
            environment=environment,
            **kwargs,
        )

    return _make


class FakeFileSystem(FileSystem):
    """In-memory stand-in for the filesystem collaborator"""

    def __init__(self, files=None, directories=None, unreadable=(), unwritable=()):
        self.files = dict(files or {})
        self.directories = set(directories or {"."})
        self.unreadable = set(unreadable)
        self.unwritable = set(unwritable)
        self.checked = []

    def exists(self, path):
        self.checked.append(path)
        return path in self.files or path in self.directories

    def is_directory(self, path):
        return path in self.directories

    def is_readable(self, path):
        return path not in self.unreadable

    def is_writable(self, path):
        return path not in self.unwritable

    def create(self, path):
        self.files[path] = b""

    def open(self, path, mode):
        if "r" in mode:
            data = self.files[path]
            return io.BytesIO(data) if "b" in mode else io.StringIO(data.decode())
        return _Sink(self.files, path, binary="b" in mode)


class _Sink(io.BytesIO):
    def __init__(self, files, path, binary):
        super().__init__()
        self._files = files
        self._path = path
        self._binary = binary

    def write(self, data):
        return super().write(data if self._binary else data.encode())

    def close(self):
        self._files[self._path] = self.getvalue()
        super().close()


@pytest.fixture
def fake_fs():
    return FakeFileSystem


@pytest.fixture
def package_logger():
    """Restore the package logger after a test reconfigures it"""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    original_handlers = list(logger.handlers)
    original_level = logger.level
    original_propagate = logger.propagate
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in original_handlers:
        logger.addHandler(handler)
    logger.setLevel(original_level)
    logger.propagate = original_propagate
