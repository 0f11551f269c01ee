"""Post-build step that writes one gzipped C header per Web UI asset."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

from webui_embed.artifacts import BEST_COMPRESSION, BundleEntry, compress, to_artifact
from webui_embed.bundle import collect_bundle
from webui_embed.errors import NameCollisionError
from webui_embed.header import BYTES_PER_LINE, render_header, sanitize_name

logger = logging.getLogger(__name__)

EMBEDDED_TYPES = ("chunk", "asset")


@dataclass
class EmbedConfig:
    build_root: Path
    # Defaults to <build_root>/../../src
    output_dir: Optional[Path] = None
    prefix: str = "ui_"
    compression_level: int = BEST_COMPRESSION
    bytes_per_line: int = BYTES_PER_LINE
    content_types: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.build_root = Path(self.build_root)
        if self.output_dir is None:
            self.output_dir = self.build_root / ".." / ".." / "src"
        self.output_dir = Path(self.output_dir)


class AssetEmbedder:
    """Compresses every chunk and asset of a build and writes its header"""

    def __init__(self, config: EmbedConfig):
        self.config = config

    def header_path(self, file_name: str) -> Path:
        return self.config.output_dir / f"{self.config.prefix}{sanitize_name(file_name)}.h"

    def check_names(self, file_names: Iterable[str]):
        """Refuse names that would share a header file or C symbol.

        Symbols are uppercased, so names that differ only in case collide too.
        """
        seen: Dict[str, str] = {}
        for file_name in file_names:
            symbol = sanitize_name(file_name).upper()
            if symbol in seen:
                raise NameCollisionError(
                    f"{seen[symbol]} and {file_name} both map to symbol {symbol}"
                )
            seen[symbol] = file_name

    def write_outputs(self, bundle: Mapping[str, BundleEntry]) -> List[Path]:
        """Write headers for the bundle in iteration order.

        Entries that are neither chunks nor assets are skipped. Name
        collisions are reported before anything is written. Existing
        headers are overwritten; I/O errors abort the remaining files.
        """
        embedded = []
        for file_name, entry in bundle.items():
            if entry.type not in EMBEDDED_TYPES:
                logger.debug(f"Skipping {entry.type} entry: {file_name}")
                continue
            embedded.append((file_name, entry))
        self.check_names(file_name for file_name, _ in embedded)

        written = []
        for file_name, entry in embedded:
            artifact = to_artifact(entry, self.config.content_types.get(file_name))
            compressed = compress(artifact, level=self.config.compression_level)
            source = render_header(compressed, file_name, width=self.config.bytes_per_line)

            output_path = self.header_path(file_name).resolve()
            self.config.output_dir.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8", newline="\n") as f:
                f.write(source)
            logger.info(f"Generated: {output_path}")
            written.append(output_path)

        return written

    def run(self) -> List[Path]:
        bundle = collect_bundle(self.config.build_root)
        logger.info(f"Embedding {len(bundle)} build output(s) from {self.config.build_root}")
        return self.write_outputs(bundle)
