"""Embed bundled Web UI assets into gzipped C headers for the firmware."""

from webui_embed.artifacts import (
    Artifact,
    Asset,
    Chunk,
    CompressedArtifact,
    OtherEntry,
    compress,
    to_artifact,
)
from webui_embed.bundle import collect_bundle
from webui_embed.embedder import AssetEmbedder, EmbedConfig
from webui_embed.errors import BundleError, EmbedError, HeaderError, NameCollisionError
from webui_embed.header import GeneratedHeader, render_header

__version__ = "0.1.0"

__all__ = [
    "Artifact",
    "Asset",
    "AssetEmbedder",
    "BundleError",
    "Chunk",
    "CompressedArtifact",
    "EmbedConfig",
    "EmbedError",
    "GeneratedHeader",
    "HeaderError",
    "NameCollisionError",
    "OtherEntry",
    "collect_bundle",
    "compress",
    "render_header",
    "to_artifact",
]
