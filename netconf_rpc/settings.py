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
import typing as t
from dataclasses import dataclass, field


def _env_flag(name: str, default: str) -> bool:
    """
    Read a boolean flag from the environment.

    Args:
        name (str): The environment variable name.
        default (str): The value used when the variable is unset.

    Returns:
        bool: True only when the value is 'true', ignoring case.
    """
    return os.getenv(name, default).lower() == "true"


@dataclass
class Settings:
    """
    netconf-rpc settings.

    Defaults are read from the environment each time an instance is created.
    """

    base_version: t.Literal["1.0", "1.1"] = field(
        default_factory=lambda: os.getenv("NETCONF_RPC_BASE_VERSION", "1.1")
    )
    error_on_warning: bool = field(
        default_factory=lambda: _env_flag("NETCONF_RPC_ERROR_ON_WARNING", "false")
    )
    strict_framing: bool = field(
        default_factory=lambda: _env_flag("NETCONF_RPC_STRICT_FRAMING", "false")
    )
