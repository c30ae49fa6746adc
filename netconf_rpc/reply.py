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
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .constants import BASE_NS_1_0
from .exceptions import ParseError, RPCError
from .framing import decode_chunks, normalize, strip_end_of_message
from .settings import Settings


logger = logging.getLogger(__name__)

ET.register_namespace("nc", BASE_NS_1_0)

OK_PATTERN = re.compile(
    r"<(?:[\w.-]+:)?ok(?:\s[^>]*?)?/>"
    r"|<(?:[\w.-]+:)?ok(?:\s[^>]*)?>\s*</(?:[\w.-]+:)?ok\s*>"
)
ROOT_PATTERN = re.compile(
    r"(?:\s|<\?.*?\?>|<!--.*?-->|<!DOCTYPE[^>]*>)*"
    r"<(?:[\w.-]+:)?rpc-reply\b[^>]*?(?:/>|>(?P<data>.*)</(?:[\w.-]+:)?rpc-reply\s*>)",
    flags=re.DOTALL,
)

ERROR_FIELDS = {
    "error-type": "type",
    "error-tag": "tag",
    "error-severity": "severity",
    "error-path": "path",
    "error-message": "message",
}


def _local_name(tag: str) -> str:
    """
    Strip the namespace from an ElementTree tag.

    Args:
        tag (str): The tag, e.g. '{urn:...}rpc-reply'.

    Returns:
        str: The local name, e.g. 'rpc-reply'.
    """
    return tag.rsplit("}", 1)[-1]


@dataclass
class RPCReply:
    """
    A decoded rpc-reply.

    ``ok`` only reports whether an ``<ok/>`` element was present. A get-config
    reply carries data instead and has ``ok`` set to False.
    """

    message_id: str = ""
    errors: t.List[RPCError] = field(default_factory=list)
    ok: bool = False
    raw_reply: str = ""
    data: str = ""

    @property
    def error(self) -> t.Optional[RPCError]:
        """
        Get the first rpc-error of any severity.

        Returns:
            t.Optional[RPCError]: The first error, or None if there were none.
        """
        return self.errors[0] if self.errors else None

    def raise_for_error(self, error_on_warning: bool = False) -> None:
        """
        Raise the first error which meets the severity threshold.

        Args:
            error_on_warning (bool): Treat errors of any severity as fatal.

        Raises:
            RPCError: when an error meets the threshold.
        """
        error = _first_error(self.errors, error_on_warning)
        if error is not None:
            raise error


def _first_error(
    errors: t.Iterable[RPCError], error_on_warning: bool
) -> t.Optional[RPCError]:
    """
    Find the first error which meets the severity threshold.

    Args:
        errors (t.Iterable[RPCError]): The errors in wire order.
        error_on_warning (bool): Accept errors of any severity.

    Returns:
        t.Optional[RPCError]: The first matching error, or None.
    """
    for error in errors:
        if error.is_fatal or error_on_warning:
            return error
    return None


def _parse_error(element: ET.Element) -> RPCError:
    """
    Build an RPCError from an rpc-error element.

    Args:
        element (ET.Element): The rpc-error element.

    Returns:
        RPCError: The error with stripped field text and serialized error-info.
    """
    values: t.Dict[str, t.Optional[str]] = {}
    for child in element:
        name = _local_name(child.tag)
        if name == "error-info":
            values["info"] = ET.tostring(child, encoding="unicode").strip()
        elif name in ERROR_FIELDS:
            values[ERROR_FIELDS[name]] = (child.text or "").strip()
    return RPCError(**values)


def _to_text(raw: t.Union[str, bytes], strict_framing: bool) -> str:
    """
    Remove session framing from a received reply.

    Args:
        raw (t.Union[str, bytes]): The reply as received from the transport.
        strict_framing (bool): Count chunk sizes when the reply is chunk framed.

    Returns:
        str: The reply text without framing.

    Raises:
        ParseError: when the reply is not valid UTF-8.
        FramingError: when strict framing is enabled and a chunk is invalid.
    """
    if strict_framing and raw[:2] in ("\n#", b"\n#"):
        text = decode_chunks(raw)
    else:
        if isinstance(raw, (bytes, bytearray)):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                logger.error("failed to decode rpc-reply: %s", e)
                raise ParseError(
                    f"failed to parse rpc-reply: {e}", raw.decode("utf-8", "replace")
                ) from e
        text = normalize(raw)
    return strip_end_of_message(text)


def parse(text: str) -> RPCReply:
    """
    Parse normalized reply text into an RPCReply.

    Args:
        text (str): The reply with framing already removed.

    Returns:
        RPCReply: The reply without a message-id.

    Raises:
        ParseError: when the text is not a well formed rpc-reply document.
    """
    try:
        root = ET.fromstring(text.strip())
    except ET.ParseError as e:
        logger.error("failed to parse rpc-reply: %s", e)
        raise ParseError(f"failed to parse rpc-reply: {e}", text) from e

    if _local_name(root.tag) != "rpc-reply":
        raise ParseError(
            f"expected element type <rpc-reply> but have <{_local_name(root.tag)}>",
            text,
        )

    errors = [
        _parse_error(child) for child in root if _local_name(child.tag) == "rpc-error"
    ]

    m = ROOT_PATTERN.match(text)
    data = (m.group("data") or "") if m else ""

    return RPCReply(
        errors=errors,
        ok=OK_PATTERN.search(text) is not None,
        raw_reply=text,
        data=data,
    )


def decode(
    raw: t.Union[str, bytes],
    error_on_warning: t.Optional[bool] = None,
    correlation_id: str = "",
    strict_framing: t.Optional[bool] = None,
    settings: t.Optional[Settings] = None,
) -> t.Tuple[RPCReply, t.Optional[RPCError]]:
    """
    Decode one rpc-reply received from the transport.

    The returned error is the first rpc-error with severity 'error', or the
    first of any severity when ``error_on_warning`` is set. The reply is fully
    populated either way.

    Args:
        raw (t.Union[str, bytes]): The reply, possibly still chunk framed.
        error_on_warning (t.Optional[bool]): Treat warnings as errors.
        correlation_id (str): The message-id sent with the request.
        strict_framing (t.Optional[bool]): Count chunk sizes instead of
            dropping marker lines.
        settings (t.Optional[Settings]): Settings to read defaults from.

    Returns:
        t.Tuple[RPCReply, t.Optional[RPCError]]: The reply and the error, if any.

    Raises:
        ParseError: when the reply is not well formed XML.
        FramingError: when strict framing is enabled and a chunk is invalid.
    """
    settings = settings or Settings()
    if error_on_warning is None:
        error_on_warning = settings.error_on_warning
    if strict_framing is None:
        strict_framing = settings.strict_framing

    text = _to_text(raw, strict_framing)
    logger.debug("decoding reply message-id=%s: %s", correlation_id, text)

    reply = parse(text)
    reply.message_id = correlation_id

    error = _first_error(reply.errors, error_on_warning)
    if error is not None:
        logger.warning("message-id=%s %s", correlation_id, error)

    return reply, error
