"""File options: string options whose value is a path checked on first access.

Claiming a path never touches the filesystem. The checks (existence,
directory, permissions) run through a ``FileSystem`` collaborator when the
caller validates or opens the file. The file operand ``-`` maps to the
standard input or output stream and is always valid.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Any

from optclaim.core.constants import FILE_OPERAND
from optclaim.core.exceptions import FileOptionError, FileOptionErrorKind
from optclaim.parsing.options import StringOption

logger = logging.getLogger(__name__)


class FileSystem:
    """Filesystem access used by file options. Replace it in tests."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_readable(self, path: str) -> bool:
        return os.access(path, os.R_OK)

    def is_writable(self, path: str) -> bool:
        return os.access(path, os.W_OK)

    def create(self, path: str) -> None:
        with open(path, "xb"):
            pass

    def open(self, path: str, mode: str) -> IO[Any]:
        return open(path, mode)

    def standard_stream(self, writing: bool, binary: bool) -> IO[Any]:
        stream = sys.stdout if writing else sys.stdin
        return getattr(stream, "buffer", stream) if binary else stream


class FileOption(StringOption):
    """Shared path handling for the reading and writing variants."""

    def __init__(
        self,
        *flags: str,
        help_message: str | None = None,
        required: bool = False,
        filesystem: FileSystem | None = None,
    ):
        super().__init__(*flags, help_message=help_message, required=required)
        self.filesystem = filesystem if filesystem is not None else FileSystem()
        self._validated = False

    @property
    def path(self) -> str | None:
        return self.value

    @property
    def is_standard_stream(self) -> bool:
        return self.value == FILE_OPERAND

    def claim_value(self, argument: str | None = None) -> None:
        super().claim_value(argument)
        self._validated = False

    def reset(self) -> None:
        super().reset()
        self._validated = False

    def _error(self, kind: FileOptionErrorKind, original_error: Exception | None = None) -> FileOptionError:
        return FileOptionError(kind, self.description, self.value, original_error)

    def _require_path(self) -> str:
        if self.value is None:
            raise FileOptionError(FileOptionErrorKind.PATH_NOT_SET, self.description)
        return self.value

    def _check(self, path: str) -> None:
        raise NotImplementedError

    def validate(self) -> None:
        """Check the path for use. Raises FileOptionError on failure."""
        path = self._require_path()
        if path == FILE_OPERAND:
            return
        self._check(path)
        self._validated = True
        logger.debug(f"{self.description} validated path {path!r}")

    def _ensure_validated(self) -> str:
        path = self._require_path()
        if path != FILE_OPERAND and not self._validated:
            self.validate()
        return path


class FileForReadingOption(FileOption):
    """A path that must name an existing, readable, non-directory file."""

    def _check(self, path: str) -> None:
        fs = self.filesystem
        if not fs.exists(path):
            raise self._error(FileOptionErrorKind.FILE_NOT_FOUND)
        if fs.is_directory(path):
            raise self._error(FileOptionErrorKind.IS_DIRECTORY)
        if not fs.is_readable(path):
            raise self._error(FileOptionErrorKind.IS_NOT_READABLE)

    def open(self, binary: bool = False) -> IO[Any]:
        """Open the file for reading; ``-`` returns standard input."""
        path = self._ensure_validated()
        if path == FILE_OPERAND:
            return self.filesystem.standard_stream(writing=False, binary=binary)
        try:
            return self.filesystem.open(path, "rb" if binary else "r")
        except OSError as e:
            raise self._error(FileOptionErrorKind.COULD_NOT_OPEN_FOR_READING, e) from e

    def data(self) -> bytes:
        """Read the whole file as bytes."""
        stream = self.open(binary=True)
        if self.is_standard_stream:
            return stream.read()
        with stream:
            return stream.read()


class FileForWritingOption(FileOption):
    """A path that is, or can be created as, a writable file."""

    def _check(self, path: str) -> None:
        fs = self.filesystem
        if path == os.sep:
            raise self._error(FileOptionErrorKind.IS_NOT_WRITABLE)

        if fs.exists(path):
            if fs.is_directory(path):
                raise self._error(FileOptionErrorKind.IS_DIRECTORY)
            if not fs.is_writable(path):
                raise self._error(FileOptionErrorKind.IS_NOT_WRITABLE)
            return

        directory = os.path.dirname(path) or os.curdir
        if not fs.exists(directory) or not fs.is_directory(directory) or not fs.is_writable(directory):
            raise self._error(FileOptionErrorKind.IS_NOT_WRITABLE)

    def open(self, binary: bool = False) -> IO[Any]:
        """Open the file for writing, creating it if needed; ``-`` returns standard output."""
        path = self._ensure_validated()
        if path == FILE_OPERAND:
            return self.filesystem.standard_stream(writing=True, binary=binary)

        if not self.filesystem.exists(path):
            try:
                self.filesystem.create(path)
            except OSError as e:
                raise self._error(FileOptionErrorKind.COULD_NOT_CREATE, e) from e

        try:
            return self.filesystem.open(path, "wb" if binary else "w")
        except OSError as e:
            raise self._error(FileOptionErrorKind.COULD_NOT_OPEN_FOR_WRITING, e) from e

    def write(self, data: bytes | str) -> None:
        """Replace the file contents with data."""
        stream = self.open(binary=isinstance(data, bytes))
        if self.is_standard_stream:
            stream.write(data)
            stream.flush()
            return
        with stream:
            stream.write(data)
