#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from collections.abc import Mapping

from smithy_core.aio.identity import ChainedIdentityResolver

from ..identity import (
    AWSCredentialsIdentity,
    AWSCredentialsResolver,
    AWSIdentityProperties,
)
from .environment import EnvironmentCredentialsResolver
from .properties import PropertiesCredentialsResolver


def create_system_settings_chain(
    *,
    environ: Mapping[str, str] | None = None,
    properties: Mapping[str, str] | None = None,
) -> AWSCredentialsResolver:
    """Creates a chain that resolves credentials from process properties, then from
    environment variables."""
    return ChainedIdentityResolver[AWSCredentialsIdentity, AWSIdentityProperties](
        resolvers=(
            PropertiesCredentialsResolver(properties),
            EnvironmentCredentialsResolver(environ),
        )
    )
