#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from collections.abc import Mapping

from ..settings import PropertySettingsSource
from .system_settings import SystemSettingsCredentialsResolver


class PropertiesCredentialsResolver(SystemSettingsCredentialsResolver):
    """Resolves AWS Credentials from process properties such as ``aws.accessKeyId``."""

    def __init__(self, properties: Mapping[str, str] | None = None) -> None:
        """Construct a PropertiesCredentialsResolver.

        :param properties: The properties to read. Defaults to
            :py:data:`smithy_aws_credentials.settings.SYSTEM_PROPERTIES`.
        """
        super().__init__(PropertySettingsSource(properties))
