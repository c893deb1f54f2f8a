"""
Read access to the object store.

Objects are stored by their sha256 hex digest (the oid), sharded over two levels of directories
using the first four characters of the oid:

    <root>/objects/ab/cd/abcd1234...

The store is written by someone else; this module only reads from it.
"""

import logging
import os
import stat
import string
from pathlib import Path
from typing import BinaryIO

from lfsserve.errors import ObjectNotFound

OID_LENGTH = 64
OID_CHARACTERS = frozenset(string.hexdigits.lower())


def is_oid(candidate: str) -> bool:
    """Is this a lowercase sha256 hex digest?"""
    return len(candidate) == OID_LENGTH and all(c in OID_CHARACTERS for c in candidate)


def object_path(root: Path, oid: str) -> Path:
    """
    Get the location of an object in the store. This does not check if the object exists.
    The oid should be validated with is_oid first.
    """
    return root / "objects" / oid[0:2] / oid[2:4] / oid


class ObjectStore:
    def __init__(self, root: str | Path):
        self.root = Path(root)

    def path(self, oid: str) -> Path:
        return object_path(self.root, oid)

    def stat(self, oid: str) -> int:
        """Return the size of the object in bytes, or raise ObjectNotFound"""
        path = self.path(oid)
        try:
            st = path.stat()
        except OSError as e:
            logging.debug(f"Cannot stat {path}: {e}")
            raise ObjectNotFound() from e
        if not stat.S_ISREG(st.st_mode):
            logging.debug(f"Cannot stat {path}: not a regular file")
            raise ObjectNotFound()
        return st.st_size

    def open(self, oid: str) -> BinaryIO:
        """Open the object for reading, or raise ObjectNotFound. The caller should close the file."""
        path = self.path(oid)
        try:
            return path.open("rb")
        except OSError as e:
            logging.debug(f"Cannot open {path}: {e}")
            raise ObjectNotFound() from e


def file_size(file: BinaryIO) -> int:
    return os.fstat(file.fileno()).st_size
