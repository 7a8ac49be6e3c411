from digestkit.uri_digest import UriDigest, filename_arg_to_uri, uri_digests_from_uris


def test_uri_digest_defaults_to_no_digest():
    ud = UriDigest("file:///a")
    assert ud.uri == "file:///a"
    assert ud.digest is None


def test_from_uris_keeps_order():
    result = uri_digests_from_uris(["b", "a", "c"])
    assert result == [UriDigest("b"), UriDigest("a"), UriDigest("c")]


def test_from_uris_accepts_generator():
    result = uri_digests_from_uris(u for u in ("x", "y"))
    assert [ud.uri for ud in result] == ["x", "y"]
    assert all(ud.digest is None for ud in result)


def test_from_uris_empty():
    assert uri_digests_from_uris([]) == []


def test_uri_with_scheme_is_kept():
    uri = "https://example.com/file.iso"
    assert filename_arg_to_uri(uri) == uri


def test_relative_path_uses_cwd(tmp_path):
    assert filename_arg_to_uri("a.txt", tmp_path) == (tmp_path / "a.txt").as_uri()


def test_relative_path_is_normalised(tmp_path):
    assert filename_arg_to_uri("sub/../a.txt", tmp_path) == (tmp_path / "a.txt").as_uri()


def test_relative_path_default_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert filename_arg_to_uri("b.bin") == filename_arg_to_uri("b.bin", tmp_path)


def test_absolute_path_is_quoted(tmp_path):
    uri = filename_arg_to_uri(str(tmp_path / "x y"))
    assert uri.startswith("file://")
    assert uri.endswith("x%20y")