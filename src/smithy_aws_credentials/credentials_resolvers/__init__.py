#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from .chain import create_system_settings_chain
from .environment import EnvironmentCredentialsResolver
from .properties import PropertiesCredentialsResolver
from .static import StaticCredentialsResolver
from .system_settings import SystemSettingsCredentialsResolver

__all__ = (
    "EnvironmentCredentialsResolver",
    "PropertiesCredentialsResolver",
    "StaticCredentialsResolver",
    "SystemSettingsCredentialsResolver",
    "create_system_settings_chain",
)
