"""Command-line options and the command that hashes text or files."""

from __future__ import annotations

import argparse
import base64
import hashlib
import os
import sys
from dataclasses import dataclass, field
from typing import NoReturn, Sequence
from urllib.parse import urlsplit
from urllib.request import url2pathname

from .digest_format import DigestFormat
from .prefs import PreferencesError, choose_hash_funcs
from .uri_digest import UriDigest, filename_arg_to_uri

PROG = "digestkit"
PACKAGE_STRING = "digestkit 1.0"

_HASH_FUNCS = {
    "MD5": "md5",
    "SHA1": "sha1",
    "SHA224": "sha224",
    "SHA256": "sha256",
    "SHA384": "sha384",
    "SHA512": "sha512",
    "SHA3-224": "sha3_224",
    "SHA3-256": "sha3_256",
    "SHA3-384": "sha3_384",
    "SHA3-512": "sha3_512",
    "BLAKE2b": "blake2b",
    "BLAKE2s": "blake2s",
}
_DEFAULT_FUNCS = ("MD5", "SHA1", "SHA256")
_CHUNK = 1 << 16


class OptionsError(Exception):
    """The command line could not be parsed."""


@dataclass
class Options:
    """Parsed command-line options."""

    check: str | None = None
    check_files: list[str] = field(default_factory=list)
    text: str | None = None
    functions: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    version: bool = False
    show_help: bool = False

    def uri_digests(self, cwd: str | os.PathLike | None = None) -> list[UriDigest]:
        """Return the file arguments as URIs to hash, in order."""
        return [UriDigest(filename_arg_to_uri(arg, cwd)) for arg in self.files]


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise OptionsError(message)


def _build_parser() -> _Parser:
    parser = _Parser(prog=PROG, add_help=False, allow_abbrev=False)
    parser.add_argument("-h", "--help", action="store_true", dest="show_help",
                        help="Show help options")
    parser.add_argument("-c", "--check", metavar="DIGEST",
                        help="Check against the specified digest or checksum")
    parser.add_argument("-C", "--check-file", action="append", default=[],
                        dest="check_files", metavar="FILE|URI",
                        help="Check digests or checksums from the specified file")
    parser.add_argument("-f", "--function", action="append", default=[],
                        dest="functions", metavar="FUNCTION",
                        help="Enable the specified Hash Function (e.g. MD5)")
    parser.add_argument("-t", "--text", metavar="TEXT", help="Hash the specified text")
    parser.add_argument("-v", "--version", action="store_true",
                        help="Show version information")
    parser.add_argument("files", nargs="*", metavar="FILE|URI")
    return parser


def parse_options(argv: Sequence[str]) -> Options:
    """Parse arguments (without the program name) into :class:`Options`."""
    ns = _build_parser().parse_intermixed_args(list(argv))
    return Options(
        check=ns.check,
        check_files=list(ns.check_files),
        text=ns.text,
        functions=list(ns.functions),
        files=list(ns.files),
        version=ns.version,
        show_help=ns.show_help,
    )


def _encode(fmt: DigestFormat, digest: bytes) -> str:
    if fmt is DigestFormat.BASE64:
        return base64.b64encode(digest).decode("ascii")
    text = digest.hex()
    return text.upper() if fmt is DigestFormat.HEX_UPPER else text


def _uri_to_path(uri: str) -> str:
    parts = urlsplit(uri)
    if parts.scheme != "file":
        raise ValueError(f"unsupported URI scheme in {uri!r}")
    return url2pathname(parts.path)


def _hash_stream(stream, funcs: list[str]) -> dict[str, bytes]:
    hashers = {name: hashlib.new(_HASH_FUNCS[name]) for name in funcs}
    for chunk in iter(lambda: stream.read(_CHUNK), b""):
        for hasher in hashers.values():
            hasher.update(chunk)
    return {name: hasher.digest() for name, hasher in hashers.items()}


def _hash_bytes(data: bytes, funcs: list[str]) -> dict[str, bytes]:
    return {name: hashlib.new(_HASH_FUNCS[name], data).digest() for name in funcs}


def main(argv: Sequence[str] | None = None) -> int:
    """Hash the given files, or text, and optionally check the result."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_options(args)
    except OptionsError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1

    if options.show_help:
        print(_build_parser().format_help(), end="")
        return 0
    if options.version:
        print(PACKAGE_STRING)
        return 0

    supported = [name for name, algo in _HASH_FUNCS.items()
                 if algo in hashlib.algorithms_available]
    try:
        funcs = choose_hash_funcs(options.functions, supported, _DEFAULT_FUNCS)
    except PreferencesError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1

    fmt = DigestFormat.HEX_LOWER
    status = 0
    digests: list[str] = []
    items = options.uri_digests()

    if items:
        for item in items:
            try:
                with open(_uri_to_path(item.uri), "rb") as fh:
                    results = _hash_stream(fh, funcs)
            except (OSError, ValueError) as exc:
                print(f"{PROG}: {item.uri}: {exc}", file=sys.stderr)
                status = 1
                continue
            for name, digest in results.items():
                encoded = _encode(fmt, digest)
                digests.append(encoded)
                print(f"{name}  {encoded}  {item.uri}")
    elif options.text is not None:
        for name, digest in _hash_bytes(options.text.encode("utf-8"), funcs).items():
            encoded = _encode(fmt, digest)
            digests.append(encoded)
            print(f"{name}  {encoded}")
    else:
        print(_build_parser().format_usage(), end="", file=sys.stderr)
        return 1

    if options.check:
        wanted = options.check.strip().lower()
        if any(d.lower() == wanted for d in digests):
            print("Check: match")
        else:
            print("Check: mismatch")
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())