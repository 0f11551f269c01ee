import gzip
import logging

import pytest

from webui_embed.artifacts import Artifact, Asset, Chunk, OtherEntry, compress, to_artifact
from webui_embed.errors import BundleError, EmbedError


@pytest.mark.parametrize("content", [b"", b"abc", bytes(range(256)) * 8])
def test_compress_round_trip(content):
    compressed = compress(Artifact("data.bin", content))
    assert gzip.decompress(compressed.compressed_bytes) == content
    assert compressed.length == len(compressed.compressed_bytes)


def test_compress_is_deterministic():
    artifact = Artifact("index.js", b"let a = 1;" * 100)
    assert compress(artifact).compressed_bytes == compress(artifact).compressed_bytes


def test_empty_content_still_produces_gzip_stream():
    compressed = compress(Artifact("empty.txt", b""))
    assert compressed.length > 0
    assert compressed.compressed_bytes[:2] == b"\x1f\x8b"


def test_compress_logs_name_and_length(caplog):
    caplog.set_level(logging.INFO)
    compressed = compress(Artifact("index.js", b"abc"))
    assert f"index.js compressed {compressed.length} bytes" in caplog.text


def test_to_artifact_uses_chunk_code_and_asset_source():
    assert to_artifact(Chunk("index.js", "abc")).content == b"abc"
    assert to_artifact(Asset("logo.png", b"\x89PNG")).content == b"\x89PNG"
    assert to_artifact(Asset("bundle.css", "a{}")).content == b"a{}"


def test_to_artifact_keeps_explicit_content_type():
    artifact = to_artifact(Asset("data", b"x"), content_type="text/plain")
    assert artifact.content_type == "text/plain"


def test_to_artifact_rejects_other_entries():
    with pytest.raises(BundleError):
        to_artifact(OtherEntry("index.js.map", "sourcemap"))


def test_unusable_entry_error_is_an_embed_error():
    assert issubclass(BundleError, EmbedError)


def test_chunk_text_with_undecodable_bytes_encodes_back_unchanged():
    raw = b"var s = '\xe9';\r\n"
    chunk = Chunk("legacy.js", raw.decode("utf-8", "surrogateescape"))
    assert to_artifact(chunk).content == raw
