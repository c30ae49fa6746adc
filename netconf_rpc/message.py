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

import logging
import typing as t
from dataclasses import dataclass

from .constants import BASE_NS_1_0, RPC_TEMPLATE
from .methods import Method
from .msgid import IdGenerator, next_id


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RPCMessage:
    """An rpc request: a message-id and the operations it carries."""

    message_id: str
    methods: t.Sequence[Method]

    def to_xml(self) -> str:
        """
        Render the rpc element.

        Returns:
            str: The rpc document with each method rendered in order.
        """
        body = "".join(method.render() for method in self.methods)
        return RPC_TEMPLATE.format(
            message_id=self.message_id, xmlns=BASE_NS_1_0, body=body
        )

    def __bytes__(self) -> bytes:
        return self.to_xml().encode()


def build(
    methods: t.Sequence[Method], id_generator: IdGenerator = next_id
) -> t.Tuple[str, bytes]:
    """
    Build an rpc request for the given methods.

    The caller keeps the returned message-id and passes it back when decoding
    the matching reply.

    Args:
        methods (t.Sequence[Method]): The operations to send, in order.
        id_generator (IdGenerator): Source of the message-id.

    Returns:
        t.Tuple[str, bytes]: The message-id and the encoded rpc document.

    Raises:
        RandomSourceError: when a message-id cannot be generated.
        ValueError: when the generator returns an empty message-id.
    """
    message_id = id_generator()
    if not message_id:
        raise ValueError("message-id must not be empty")

    message = RPCMessage(message_id=message_id, methods=tuple(methods))
    logger.debug(
        "built rpc message-id=%s with %d method(s)", message_id, len(message.methods)
    )
    return message_id, bytes(message)
