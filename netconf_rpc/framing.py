"""
Copyright 2024 Nomios UK&I

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re
import logging
import typing as t
from enum import Enum

from .constants import (
    CHUNK_MARKER,
    END_OF_MESSAGE,
    BASE_10_TEMPLATE,
    BASE_11_TEMPLATE,
)
from .exceptions import FramingError
from .settings import Settings


logger = logging.getLogger(__name__)

CHUNK_HEADER_PATTERN = re.compile(rb"\n#([1-9][0-9]*)\n")
END_OF_CHUNKS_PATTERN = re.compile(rb"\n##\n")
MAX_CHUNK_SIZE = 4294967295


class NetconfBaseVersion(Enum):
    """
    NETCONF protocol versions.
    """

    BASE_10 = "1.0"
    BASE_11 = "1.1"


def normalize(raw: str) -> str:
    """
    Remove chunked framing marker lines from a reply.

    Every line starting with '#' is dropped and the remaining lines are joined
    without line terminators. Input with no marker lines only loses its
    newlines.

    Args:
        raw (str): The text received from the transport.

    Returns:
        str: The reply text with marker lines removed.
    """
    return "".join(
        line for line in raw.split("\n") if not line.startswith(CHUNK_MARKER)
    )


def decode_chunks(raw: t.Union[str, bytes]) -> str:
    """
    Reconstruct a chunked framed message counting every chunk size.

    Args:
        raw (t.Union[str, bytes]): One complete chunked message including the
            end-of-chunks marker.

    Returns:
        str: The concatenated chunk payloads.

    Raises:
        FramingError: when a chunk header is missing, a chunk size is invalid
            or the payload is not valid UTF-8.
    """
    data = raw.encode() if isinstance(raw, str) else bytes(raw)
    position = 0
    payload = bytearray()

    while not END_OF_CHUNKS_PATTERN.match(data, position):
        m = CHUNK_HEADER_PATTERN.match(data, position)
        if m is None:
            raise FramingError(
                f"invalid chunk header at offset {position}: {data[position:position + 16]!r}"
            )

        length = int(m.group(1))
        if length > MAX_CHUNK_SIZE:
            raise FramingError(f"chunk size {length} exceeds maximum {MAX_CHUNK_SIZE}")

        chunk = data[m.end() : m.end() + length]
        if len(chunk) != length:
            raise FramingError(
                f"received invalid chunk size expected={length} received={len(chunk)}"
            )

        logger.debug("decoded chunk of %d bytes", length)
        payload.extend(chunk)
        position = m.end() + length

    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FramingError(f"chunk payload is not valid UTF-8: {e}") from e


def strip_end_of_message(text: str) -> str:
    """
    Remove a trailing NETCONF 1.0 end-of-message marker.

    Args:
        text (str): The reply text.

    Returns:
        str: The text without the marker and the whitespace before it.
    """
    stripped = text.rstrip()
    if stripped.endswith(END_OF_MESSAGE):
        return stripped[: -len(END_OF_MESSAGE)].rstrip()
    return text


def frame(
    message: t.Union[str, bytes],
    base_version: t.Optional[str] = None,
    settings: t.Optional[Settings] = None,
) -> bytes:
    """
    Add session framing to an outgoing message.

    Args:
        message (t.Union[str, bytes]): The XML document to send.
        base_version (t.Optional[str]): '1.0' or '1.1', defaults to the settings value.
        settings (t.Optional[Settings]): Settings to read defaults from.

    Returns:
        bytes: The framed message.

    Raises:
        ValueError: when the base version is invalid.
    """
    if base_version is None:
        base_version = (settings or Settings()).base_version

    try:
        version = NetconfBaseVersion(base_version)
    except ValueError as e:
        raise ValueError(
            f"Invalid NETCONF base version {base_version}: must be '1.0' or '1.1'"
        ) from e

    content = message.decode() if isinstance(message, bytes) else message

    if version is NetconfBaseVersion.BASE_10:
        return BASE_10_TEMPLATE.format(content=content).encode()
    return BASE_11_TEMPLATE.format(
        length=len(content.encode()), content=content
    ).encode()
