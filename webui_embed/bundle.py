"""Read a finished build output directory as bundler entries."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator

from webui_embed.artifacts import TEXT_ENCODING, TEXT_ERRORS, Asset, BundleEntry, Chunk, OtherEntry
from webui_embed.errors import BundleError

logger = logging.getLogger(__name__)

CHUNK_SUFFIXES = {".js", ".mjs"}
SOURCEMAP_SUFFIX = ".map"


def iter_files(root: Path) -> Iterator[Path]:
    for path in sorted(root.rglob("*")):
        if path.is_file():
            yield path


def classify(path: Path, file_name: str) -> BundleEntry:
    suffix = path.suffix.lower()
    if suffix == SOURCEMAP_SUFFIX:
        return OtherEntry(file_name=file_name, type="sourcemap")
    if suffix in CHUNK_SUFFIXES:
        # read_bytes keeps CRLF line endings that read_text would translate
        code = path.read_bytes().decode(TEXT_ENCODING, TEXT_ERRORS)
        return Chunk(file_name=file_name, code=code)
    return Asset(file_name=file_name, source=path.read_bytes())


def collect_bundle(build_root: Path) -> Dict[str, BundleEntry]:
    """Map each output file name, relative to the build root, to its entry"""
    if not build_root.is_dir():
        raise BundleError(f"Build output directory not found: {build_root}")

    bundle: Dict[str, BundleEntry] = {}
    for path in iter_files(build_root):
        file_name = path.relative_to(build_root).as_posix()
        bundle[file_name] = classify(path, file_name)
        logger.debug(f"Found {bundle[file_name].type}: {file_name}")
    return bundle
