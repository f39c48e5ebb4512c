"""Tooling for collecting cluster logs: unpacking tar streams onto the host."""

from __future__ import annotations

import logging
import os
import tarfile
from typing import BinaryIO

__all__ = ["untar"]

_CHUNK = 64 * 1024

_log = logging.getLogger(__name__)


class _PrefixedReader:
    """Reader yielding some already-read bytes before the rest of a stream."""

    def __init__(self, prefix: bytes, stream: BinaryIO) -> None:
        self._prefix = prefix
        self._stream = stream

    def read(self, size: int = -1) -> bytes:
        if not self._prefix:
            return self._stream.read(size)
        if size is None or size < 0:
            data = self._prefix + self._stream.read()
            self._prefix = b""
            return data
        head, self._prefix = self._prefix[:size], self._prefix[size:]
        if len(head) < size:
            head += self._stream.read(size - len(head))
        return head


def _drain(stream: BinaryIO) -> None:
    while stream.read(_CHUNK):
        pass


def _write_member(archive: tarfile.TarFile, member: tarfile.TarInfo, target: str) -> None:
    source = archive.extractfile(member)
    fd = os.open(target, os.O_CREAT | os.O_RDWR, member.mode & 0o7777)
    written = 0
    try:
        with os.fdopen(fd, "wb") as out:
            if source is not None:
                while chunk := source.read(_CHUNK):
                    out.write(chunk)
                    written += len(chunk)
    except OSError as err:
        raise OSError(f"error writing to {target}: {err}") from err
    if written != member.size:
        raise OSError(f"only wrote {written} bytes to {target}; expected {member.size}")


def untar(stream: BinaryIO, directory: str | os.PathLike, logger: logging.Logger | None = None) -> None:
    """Unpack the tar archive read from stream into directory.

    Regular files and directories are recreated; other entry types are
    skipped with a warning. Any bytes after the archive are consumed.
    """
    logger = logger or _log
    directory = os.fspath(directory)

    head = stream.read(tarfile.BLOCKSIZE)
    if not head:
        return

    try:
        archive = tarfile.open(fileobj=_PrefixedReader(head, stream), mode="r|")
    except tarfile.TarError as err:
        raise tarfile.ReadError(f"tar reading error: {err}") from err

    with archive:
        try:
            for member in archive:
                target = os.path.normpath(os.path.join(directory, *member.name.split("/")))
                if member.isreg():
                    _write_member(archive, member, target)
                elif member.isdir():
                    if not os.path.exists(target):
                        os.makedirs(target, mode=0o755, exist_ok=True)
                else:
                    logger.warning(
                        "tar file entry %s contained unsupported file type %r",
                        member.name,
                        member.type,
                    )
        except tarfile.TarError as err:
            raise tarfile.ReadError(f"tar reading error: {err}") from err

    _drain(stream)