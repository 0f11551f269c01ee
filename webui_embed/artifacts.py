"""Build output entries and their gzip compression.

The bundler hands over one entry per output file. Code chunks carry text,
static assets carry bytes or text. Anything else (source maps) is tagged
with its own type and is never embedded.
"""

from __future__ import annotations

import gzip
import logging
from dataclasses import dataclass
from typing import Optional, Union

from webui_embed.errors import BundleError

logger = logging.getLogger(__name__)

BEST_COMPRESSION = 9

# Chunk text decoded from disk encodes back to the exact file bytes
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


@dataclass(frozen=True)
class Chunk:
    file_name: str
    code: str
    type: str = "chunk"


@dataclass(frozen=True)
class Asset:
    file_name: str
    source: Union[bytes, str]
    type: str = "asset"


@dataclass(frozen=True)
class OtherEntry:
    file_name: str
    type: str


BundleEntry = Union[Chunk, Asset, OtherEntry]


@dataclass(frozen=True)
class Artifact:
    """A single finalized build output"""

    name: str
    content: bytes
    content_type: Optional[str] = None


@dataclass(frozen=True)
class CompressedArtifact:
    source: Artifact
    compressed_bytes: bytes

    @property
    def length(self) -> int:
        return len(self.compressed_bytes)


def _as_bytes(value: Union[bytes, str]) -> bytes:
    if isinstance(value, str):
        return value.encode(TEXT_ENCODING, TEXT_ERRORS)
    return bytes(value)


def to_artifact(entry: BundleEntry, content_type: Optional[str] = None) -> Artifact:
    """Extract the content of a chunk or asset entry"""
    if entry.type == "chunk":
        content = _as_bytes(entry.code)
    elif entry.type == "asset":
        content = _as_bytes(entry.source)
    else:
        raise BundleError(f"Cannot embed bundle entry of type {entry.type!r}: {entry.file_name}")
    return Artifact(name=entry.file_name, content=content, content_type=content_type)


def compress(artifact: Artifact, level: int = BEST_COMPRESSION) -> CompressedArtifact:
    """Gzip the artifact content.

    The gzip header timestamp is pinned to zero so identical input always
    yields identical output.
    """
    compressed = gzip.compress(artifact.content, compresslevel=level, mtime=0)
    logger.info(f"{artifact.name} compressed {len(compressed)} bytes")
    return CompressedArtifact(source=artifact, compressed_bytes=compressed)
