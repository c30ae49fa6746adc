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
from dataclasses import dataclass

from .constants import (
    LOCK_TEMPLATE,
    UNLOCK_TEMPLATE,
    GET_CONFIG_TEMPLATE,
    GET_TEMPLATE,
    EDIT_CONFIG_TEMPLATE,
)


@t.runtime_checkable
class Method(t.Protocol):
    """An operation which renders to the XML fragment placed inside an rpc."""

    def render(self) -> str: ...


@dataclass(frozen=True)
class RawMethod:
    """
    An operation given as a ready made XML fragment.

    Arguments are not escaped or validated.
    """

    xml: str

    def render(self) -> str:
        """
        Render the fragment.

        Returns:
            str: The XML fragment unchanged.
        """
        return self.xml


def method_lock(target: str) -> RawMethod:
    """
    Lock a configuration datastore.

    Args:
        target (str): The datastore name, e.g. 'candidate'.

    Returns:
        RawMethod: The lock operation.
    """
    return RawMethod(LOCK_TEMPLATE.format(target=target))


def method_unlock(target: str) -> RawMethod:
    """
    Release a configuration datastore lock.

    Args:
        target (str): The datastore name.

    Returns:
        RawMethod: The unlock operation.
    """
    return RawMethod(UNLOCK_TEMPLATE.format(target=target))


def method_get_config(source: str) -> RawMethod:
    """
    Retrieve a configuration datastore.

    Args:
        source (str): The datastore name, e.g. 'running'.

    Returns:
        RawMethod: The get-config operation.
    """
    return RawMethod(GET_CONFIG_TEMPLATE.format(source=source))


def method_get(filter_type: str, filter_body: str) -> RawMethod:
    """
    Retrieve configuration and state data.

    Args:
        filter_type (str): The filter type attribute, e.g. 'subtree' or 'xpath'.
        filter_body (str): The XML placed inside the filter element.

    Returns:
        RawMethod: The get operation.
    """
    return RawMethod(
        GET_TEMPLATE.format(filter_type=filter_type, filter_body=filter_body)
    )


def method_edit_config(target: str, config: str) -> RawMethod:
    """
    Merge configuration into a datastore, rolling back on any error.

    Args:
        target (str): The datastore name.
        config (str): The XML placed inside the config element.

    Returns:
        RawMethod: The edit-config operation.
    """
    return RawMethod(EDIT_CONFIG_TEMPLATE.format(target=target, config=config))
