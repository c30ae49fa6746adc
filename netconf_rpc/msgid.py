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

import os
import uuid
import typing as t

from .exceptions import RandomSourceError


IdGenerator = t.Callable[[], str]


def next_id() -> str:
    """
    Generate a random version 4 style message-id.

    Returns:
        str: A lowercase hex id grouped 8-4-4-4-12.

    Raises:
        RandomSourceError: when the operating system random source is unavailable.
    """
    try:
        raw = os.urandom(16)
    except (NotImplementedError, OSError) as e:
        raise RandomSourceError(f"could not read random source: {e}") from e
    return str(uuid.UUID(bytes=raw, version=4))
