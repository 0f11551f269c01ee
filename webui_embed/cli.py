#!/usr/bin/env python3
"""
Web UI asset embedder

Run after the front-end build has written its output directory. Every
script chunk and static asset is gzipped at the best compression level and
written as a C header holding the byte array and an ESPAsyncWebServer
handler that serves it with Content-Encoding: gzip.

Output: <output-dir>/ui_<name>.h, one per asset, overwritten on each run.
"""

import argparse
import logging
import sys
from pathlib import Path

from webui_embed.artifacts import BEST_COMPRESSION
from webui_embed.embedder import AssetEmbedder, EmbedConfig
from webui_embed.header import BYTES_PER_LINE

logger = logging.getLogger(__name__)


def parse_content_type(value: str) -> tuple:
    name, sep, content_type = value.partition("=")
    if not sep or not name or not content_type:
        raise argparse.ArgumentTypeError(f"expected NAME=TYPE, got {value!r}")
    return name, content_type


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webui-embed",
        description="Convert bundled Web UI assets into gzipped C headers",
    )
    parser.add_argument(
        'build_root', nargs='?', type=Path, default=Path('dist'),
        help='Build output directory (default: ./dist)'
    )
    parser.add_argument(
        '-o', '--output-dir', type=Path, default=None,
        help='Directory for generated headers (default: <build_root>/../../src)'
    )
    parser.add_argument(
        '--prefix', default='ui_',
        help='File name prefix for generated headers (default: ui_)'
    )
    parser.add_argument(
        '--level', type=int, choices=range(1, 10), default=BEST_COMPRESSION, metavar='1-9',
        help=f'Gzip compression level (default: {BEST_COMPRESSION})'
    )
    parser.add_argument(
        '--width', type=int, default=BYTES_PER_LINE,
        help=f'Number of bytes per line in the generated array (default: {BYTES_PER_LINE})'
    )
    parser.add_argument(
        '--content-type', dest='content_types', action='append', default=[],
        type=parse_content_type, metavar='NAME=TYPE',
        help='Explicit MIME type for a build output file (repeatable)'
    )
    parser.add_argument(
        '--debug', action='store_true',
        help='Enable debug logging'
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.width < 1:
        parser.error('--width must be at least 1')

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    config = EmbedConfig(
        build_root=args.build_root,
        output_dir=args.output_dir,
        prefix=args.prefix,
        compression_level=args.level,
        bytes_per_line=args.width,
        content_types=dict(args.content_types),
    )

    try:
        written = AssetEmbedder(config).run()
    except Exception as e:
        logger.error(f"Embedding failed: {e}")
        sys.exit(1)

    logger.info(f"Wrote {len(written)} header(s) to {config.output_dir.resolve()}")


if __name__ == '__main__':
    main()
