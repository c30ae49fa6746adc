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

from .exceptions import (
    CodecError,
    RandomSourceError,
    ParseError,
    FramingError,
    RPCError,
)
from .framing import NetconfBaseVersion, normalize, decode_chunks, frame
from .message import RPCMessage, build
from .methods import (
    Method,
    RawMethod,
    method_lock,
    method_unlock,
    method_get_config,
    method_get,
    method_edit_config,
)
from .msgid import next_id
from .reply import RPCReply, decode
from .settings import Settings

__all__ = [
    "CodecError",
    "RandomSourceError",
    "ParseError",
    "FramingError",
    "RPCError",
    "NetconfBaseVersion",
    "normalize",
    "decode_chunks",
    "frame",
    "RPCMessage",
    "build",
    "Method",
    "RawMethod",
    "method_lock",
    "method_unlock",
    "method_get_config",
    "method_get",
    "method_edit_config",
    "next_id",
    "RPCReply",
    "decode",
    "Settings",
]
