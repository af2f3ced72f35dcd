#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from smithy_core.exceptions import MissingDependencyError, SmithyIdentityError


class ClientConfigurationError(SmithyIdentityError):
    """Base exception type for credentials that can't be resolved because the client
    is misconfigured."""


class InvalidTokenFilePathError(ClientConfigurationError):
    """Exception raised when a web identity token file path is not absolute."""


class MissingCredentialsError(ClientConfigurationError):
    """Exception raised when a required credential setting is absent or blank."""


class MissingWebIdentityDependencyError(
    ClientConfigurationError, MissingDependencyError
):
    """Exception raised when web identity credentials are configured, but no token
    exchange implementation is installed."""


class WebIdentityFactoryConstructionError(ClientConfigurationError):
    """Exception raised when a registered web identity factory can't be
    constructed."""
