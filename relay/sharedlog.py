"""
Append-only log shared between the generator and the echo server.

A record is committed once its trailing newline is on disk. Each append is
a single write on an O_APPEND descriptor, and readers drop any trailing
partial line, so a reader racing a writer sees whole records only.
"""

import os

from relay.errors import LogUnavailableError

NEWLINE = b"\n"


class SharedLog:
    """Append-only, newline-framed text log at a fixed path."""

    def __init__(self, path, fsync=False):
        self.path = os.fspath(path)
        self.fsync = fsync

    def __repr__(self):
        return f"SharedLog({self.path!r})"

    def exists(self):
        return os.path.isfile(self.path)

    def append(self, record):
        """Append one record plus its line terminator."""
        if "\n" in record or "\r" in record:
            raise ValueError(f"record must be a single line: {record!r}")
        data = record.encode("utf-8") + NEWLINE

        parent = os.path.dirname(self.path)
        try:
            if parent:
                os.makedirs(parent, exist_ok=True)
            fd = os.open(self.path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, 0o644)
        except OSError as e:
            raise LogUnavailableError(self.path, e.strerror or str(e)) from e

        try:
            written = os.write(fd, data)
            if written != len(data):
                raise LogUnavailableError(
                    self.path, f"short write ({written} of {len(data)} bytes)"
                )
            if self.fsync:
                os.fsync(fd)
        except OSError as e:
            raise LogUnavailableError(self.path, e.strerror or str(e)) from e
        finally:
            os.close(fd)

    def read(self):
        """
        Return the committed bytes of the log, or None if it does not exist.

        Bytes after the last newline belong to an append still in flight and
        are not returned.
        """
        try:
            with open(self.path, "rb") as f:
                data = f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise LogUnavailableError(self.path, e.strerror or str(e)) from e

        end = data.rfind(NEWLINE)
        return data[:end + 1]

    def read_records(self):
        """Committed records in append order; empty if the log is absent."""
        data = self.read()
        if not data:
            return []
        return data.decode("utf-8").split("\n")[:-1]
