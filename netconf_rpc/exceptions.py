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

import typing as t


class CodecError(Exception):
    """Base class for all NETCONF RPC codec errors."""


class RandomSourceError(CodecError):
    """The secure random source could not supply a message-id."""


class ParseError(CodecError):
    """
    A reply could not be parsed as an rpc-reply document.

    Args:
        message (str): The error description.
        text (str): The normalized reply text which failed to parse.
    """

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


class FramingError(CodecError, ValueError):
    """Chunked framing could not be reconstructed."""


class RPCError(CodecError):
    """
    An rpc-error reported by the server.

    Decoding returns these alongside the reply rather than raising them, so the
    caller can decide whether a warning is fatal.
    """

    FIELDS = ("type", "tag", "severity", "path", "message", "info")

    def __init__(
        self,
        type: str = "",
        tag: str = "",
        severity: str = "",
        path: str = "",
        message: str = "",
        info: t.Optional[str] = None,
    ):
        self.type = type
        self.tag = tag
        self.severity = severity
        self.path = path
        self.message = message
        self.info = info
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"netconf rpc [{self.severity}] '{self.message}'"

    def __repr__(self) -> str:
        return f"RPCError(tag={self.tag!r}, severity={self.severity!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RPCError):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = Exception.__hash__

    @property
    def is_fatal(self) -> bool:
        """True when the severity is 'error'."""
        return self.severity == "error"

    def to_dict(self) -> t.Dict[str, t.Optional[str]]:
        """
        Return the error fields as a dictionary.

        Returns:
            t.Dict[str, t.Optional[str]]: Field name to value.
        """
        return {field: getattr(self, field) for field in RPCError.FIELDS}
