"""Pairs of a URI and an optional expected digest."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")


@dataclass
class UriDigest:
    """A URI to hash, with the digest it is expected to have, if any."""

    uri: str
    digest: str | None = None


def uri_digests_from_uris(uris: Iterable[str]) -> list[UriDigest]:
    """Wrap each URI, in order, with no expected digest."""
    return [UriDigest(uri) for uri in uris]


def filename_arg_to_uri(arg: str, cwd: str | os.PathLike | None = None) -> str:
    """Turn a command-line argument into a URI.

    Absolute paths become file URIs, arguments that already carry a URI
    scheme are kept, and anything else is taken relative to ``cwd``
    (the current directory when not given).
    """
    if os.path.isabs(arg):
        return Path(os.path.normpath(arg)).as_uri()
    if _SCHEME.match(arg):
        return arg
    base = os.getcwd() if cwd is None else os.fspath(cwd)
    return Path(os.path.normpath(os.path.join(base, arg))).as_uri()