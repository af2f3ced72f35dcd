#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from collections.abc import Mapping

from ..settings import EnvironmentSettingsSource
from .system_settings import SystemSettingsCredentialsResolver


class EnvironmentCredentialsResolver(SystemSettingsCredentialsResolver):
    """Resolves AWS Credentials from system environment variables.

    Reads ``AWS_ACCESS_KEY_ID``, ``AWS_SECRET_ACCESS_KEY``, ``AWS_SESSION_TOKEN``,
    ``AWS_ROLE_ARN``, ``AWS_ROLE_SESSION_NAME``, and ``AWS_WEB_IDENTITY_TOKEN_FILE``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Construct an EnvironmentCredentialsResolver.

        :param environ: The environment variables to read. Defaults to
            ``os.environ``.
        """
        super().__init__(EnvironmentSettingsSource(environ))
