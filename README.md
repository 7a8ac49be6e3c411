# digestkit

A small command that hashes text or files and can check the result against
an expected digest. It also provides library pieces for such a tool:

- `digestkit.opts` parses the command line into an `Options` value and runs
  the `digestkit` command (`main`).
- `digestkit.prefs` loads and saves `Preferences` as JSON and picks the hash
  functions to enable (`choose_hash_funcs`).
- `digestkit.digest_format` names the output formats of a digest
  (`DigestFormat`).
- `digestkit.uri_digest` pairs URIs with an optional expected digest
  (`UriDigest`) and turns command-line arguments into file URIs.
- `digestkit.progress` formats sizes, time left and progress messages.

## Installation

```
pip install .
```

## Command line

```
digestkit [OPTIONS] [FILE|URI...]
```

| Option | Meaning |
| --- | --- |
| `-h`, `--help` | Show the help text |
| `-c`, `--check DIGEST` | Check against the specified digest or checksum |
| `-C`, `--check-file FILE\|URI` | Accepted and parsed (may be repeated), but not used by the command |
| `-f`, `--function FUNCTION` | Enable the specified hash function, e.g. `MD5` (may be repeated) |
| `-t`, `--text TEXT` | Hash the specified text (used when no files are given) |
| `-v`, `--version` | Show version information |

Remaining arguments are files to hash. Relative names are resolved against
the current directory and turned into `file:` URIs; arguments that already
carry a URI scheme are kept as they are, but only `file:` URIs can be read.

The hash functions are `MD5`, `SHA1`, `SHA224`, `SHA256`, `SHA384`,
`SHA512`, `SHA3-224`, `SHA3-256`, `SHA3-384`, `SHA3-512`, `BLAKE2b` and
`BLAKE2s`, as far as the local `hashlib` provides them. Unknown names given
with `-f` are logged as warnings. When no valid name is given, `MD5`, `SHA1`
and `SHA256` are used.

Each digest is printed in lower-case hex, one line per function:
`NAME  DIGEST  URI` for files, `NAME  DIGEST` for text. With `--check`, the
given digest is compared case-insensitively with every digest printed, and
`Check: match` or `Check: mismatch` follows.

The exit status is 1 when the arguments cannot be parsed, a file cannot be
read, the check does not match, or neither files nor text were given (the
usage line is then printed); otherwise it is 0.

```
digestkit --version
digestkit -t hello
digestkit -f MD5 -f SHA256 --check d41d8cd98f00b204e9800998ecf8427e empty.txt
```

## Library use

```python
from digestkit.opts import parse_options, OptionsError

try:
    options = parse_options(["-f", "SHA1", "-t", "hello"])
except OptionsError as exc:
    print(exc)
```

`Options.uri_digests(cwd)` turns the file arguments into `UriDigest`
values, in order, with `digest` left as `None`:

```python
for item in options.uri_digests("/home/me"):
    print(item.uri, item.digest)
```

Digest formats are stored as `hex-lower`, `hex-upper` or `base64`; an
unknown name raises `ValueError`:

```python
from digestkit.digest_format import DigestFormat

fmt = DigestFormat.from_pref("hex-upper")
assert fmt.to_pref() == "hex-upper"
```

Views are stored as `file`, `text` or `file-list` (`View.from_pref`,
`View.to_pref`). Preferences are kept in a JSON file under the keys
`hash-functions`, `digest-format`, `view`, `show-toolbar`, `window-max`,
`window-width` and `window-height`. A missing file gives the defaults;
unreadable or malformed data raises `PreferencesError`.

```python
from digestkit.prefs import load_preferences, save_preferences

prefs = load_preferences("settings.json")
save_preferences(prefs, "settings.json")
```

`choose_hash_funcs(names, supported, defaults)` returns the requested names
that are supported, in the order of `supported`. If there are none, it
returns the supported defaults, then the first supported function, and
raises `PreferencesError` when nothing is supported.

Progress messages come from `format_progress`:

```python
from digestkit.progress import format_progress

print(format_progress(file_size=10_000_000, total_read=2_500_000, elapsed=2.0))
# 2.5 MB of 10.0 MB - 6 seconds left (1.2 MB/sec)
```

## What it does not do

- The command does not read checksum files: `--check-file` is parsed but
  ignored.
- The command does not load or save preferences and always prints hex in
  lower case; `digestkit.prefs` is for programs that build on the package.
- There is no HMAC support, no progress display while hashing, and no
  graphical interface.
- Only local files (`file:` URIs) can be hashed.

## Running the tests

```
pip install .[test]
pytest
```