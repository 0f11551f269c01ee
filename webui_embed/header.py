"""Render compressed artifacts as C headers served by ESPAsyncWebServer."""

from __future__ import annotations

import logging
import mimetypes
import re
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Optional

from webui_embed.artifacts import CompressedArtifact
from webui_embed.errors import HeaderError

logger = logging.getLogger(__name__)

BYTES_PER_LINE = 16
DEFAULT_CONTENT_TYPE = "application/octet-stream"
# Length constant is emitted as uint16_t
MAX_PAYLOAD = 0xFFFF

CONTENT_TYPES = {
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".mjs": "application/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".txt": "text/plain",
}

_INVALID_CHARS = re.compile(r"[^0-9A-Za-z_]")
_CASE_BOUNDARIES = (
    re.compile(r"([a-z0-9])([A-Z])"),
    re.compile(r"([A-Z])([A-Z][a-z])"),
)
_WORD_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")
# Built-in table only; the module-level functions also load /etc/mime.types
_MIME_TYPES = mimetypes.MimeTypes()

HEADER_TEMPLATE = """\
/*
 * Binary array for the Web UI.
 * Gzip is used for smaller size and improved speeds.
 */

// Autogenerated do not edit!!
const uint16_t {length_name} = {length};
const uint8_t {array_name}[] PROGMEM = {{
{array}
}};

void {function_name}(AsyncWebServerRequest* request) {{
  AsyncWebServerResponse *response = request->beginResponse_P(200, "{content_type}", {array_name}, {length_name});
  response->addHeader(F("Content-Encoding"), "gzip");
  request->send(response);
}}
"""


def sanitize_name(file_name: str) -> str:
    """Turn a bundle file name into a C identifier base: index.js -> index_js"""
    identifier = _INVALID_CHARS.sub("_", file_name)
    if not identifier or identifier[0].isdigit():
        identifier = "_" + identifier
    return identifier


def pascal_case(identifier: str) -> str:
    for boundary in _CASE_BOUNDARIES:
        identifier = boundary.sub(r"\1 \2", identifier)
    words = [word for word in _WORD_SEPARATORS.split(identifier.replace("_", " ")) if word]
    parts = []
    for index, word in enumerate(words):
        first, rest = word[0], word[1:].lower()
        if index > 0 and first.isdigit():
            parts.append(f"_{first}{rest}")
        else:
            parts.append(f"{first.upper()}{rest}")
    return "".join(parts)


def format_bytes(data: bytes, width: int = BYTES_PER_LINE, indent: str = "  ") -> str:
    if not data:
        return ""
    lines = []
    for idx in range(0, len(data), width):
        chunk = data[idx : idx + width]
        lines.append(indent + ", ".join(f"0x{byte:02x}" for byte in chunk))
    return ",\n".join(lines)


def resolve_content_type(file_name: str, content_type: Optional[str] = None) -> str:
    """Pick the MIME type sent with the embedded response.

    An explicit type always wins. Unknown extensions fall back to
    application/octet-stream.
    """
    if content_type:
        return content_type
    suffix = PurePosixPath(file_name).suffix.lower()
    if suffix in CONTENT_TYPES:
        return CONTENT_TYPES[suffix]
    guessed, _ = _MIME_TYPES.guess_type(file_name, strict=False)
    if guessed:
        return guessed
    logger.warning(f"No content type known for {file_name}, using {DEFAULT_CONTENT_TYPE}")
    return DEFAULT_CONTENT_TYPE


@dataclass(frozen=True)
class GeneratedHeader:
    identifier_base: str
    byte_array_literal: str
    length_value: int
    content_type: str

    @property
    def array_name(self) -> str:
        return self.identifier_base.upper()

    @property
    def length_name(self) -> str:
        return f"{self.array_name}_L"

    @property
    def serving_function_name(self) -> str:
        return f"serve{pascal_case(self.identifier_base)}"

    def render(self) -> str:
        return HEADER_TEMPLATE.format(
            length_name=self.length_name,
            length=self.length_value,
            array_name=self.array_name,
            array=self.byte_array_literal,
            function_name=self.serving_function_name,
            content_type=self.content_type,
        )


def build_header(
    compressed: CompressedArtifact,
    file_name: str,
    content_type: Optional[str] = None,
    width: int = BYTES_PER_LINE,
) -> GeneratedHeader:
    if compressed.length > MAX_PAYLOAD:
        raise HeaderError(
            f"{file_name} compresses to {compressed.length} bytes, "
            f"more than the {MAX_PAYLOAD} a uint16_t length can hold"
        )
    return GeneratedHeader(
        identifier_base=sanitize_name(file_name),
        byte_array_literal=format_bytes(compressed.compressed_bytes, width=width),
        length_value=compressed.length,
        content_type=resolve_content_type(file_name, content_type or compressed.source.content_type),
    )


def render_header(
    compressed: CompressedArtifact,
    file_name: str,
    content_type: Optional[str] = None,
    width: int = BYTES_PER_LINE,
) -> str:
    """Render the header text for one compressed artifact"""
    return build_header(compressed, file_name, content_type, width).render()
