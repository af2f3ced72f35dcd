#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
"""Support for credentials sourced from JWT web identity tokens.

Exchanging a web identity token for credentials requires a call to STS, which this
package doesn't implement. Instead, the package that does registers a
:py:class:`WebIdentityCredentialsResolverFactory` constructor, either by calling
:py:func:`register_factory` when it is imported or by advertising it under the
``smithy_aws_credentials.factories`` entry point group.
"""

import logging
import os
from collections.abc import Callable
from importlib.metadata import entry_points
from pathlib import Path
from typing import Final, Protocol

from .exceptions import (
    InvalidTokenFilePathError,
    MissingWebIdentityDependencyError,
    WebIdentityFactoryConstructionError,
)
from .identity import AWSCredentialsResolver

logger: Final = logging.getLogger(__name__)

WEB_IDENTITY_FACTORY: Final = "web-identity-factory"
"""The capability key a web identity factory constructor is registered under."""

ENTRY_POINT_GROUP: Final = "smithy_aws_credentials.factories"


class WebIdentityCredentialsResolverFactory(Protocol):
    """Creates credentials resolvers that exchange a web identity token for
    temporary credentials."""

    def create(
        self,
        role_arn: str,
        role_session_name: str | None,
        web_identity_token: str,
    ) -> AWSCredentialsResolver:
        """Create a credentials resolver for a role.

        :param role_arn: The ARN of the role to assume.
        :param role_session_name: The name of the role session. If None, the factory
            must pick one.
        :param web_identity_token: The JWT issued by the identity provider.
        """
        ...


type FactoryConstructor = Callable[[], WebIdentityCredentialsResolverFactory]

_FACTORIES: dict[str, FactoryConstructor] = {}


def register_factory(key: str, constructor: FactoryConstructor) -> None:
    """Register a factory constructor under a capability key.

    A later registration for the same key replaces the earlier one.

    :param key: The capability key, such as :py:data:`WEB_IDENTITY_FACTORY`.
    :param constructor: A callable taking no arguments that builds the factory.
    """
    logger.debug("Registering factory constructor %s for %s.", constructor, key)
    _FACTORIES[key] = constructor


def unregister_factory(key: str) -> None:
    """Remove the factory constructor registered under a capability key, if any."""
    _FACTORIES.pop(key, None)


def _find_constructor(key: str) -> FactoryConstructor:
    if key in _FACTORIES:
        return _FACTORIES[key]

    for entry_point in entry_points(group=ENTRY_POINT_GROUP, name=key):
        logger.debug("Loading factory constructor for %s from %s.", key, entry_point)
        try:
            return entry_point.load()
        except (ImportError, AttributeError) as e:
            raise MissingWebIdentityDependencyError(
                "To use web identity tokens, the STS token exchange module must be "
                "installed."
            ) from e

    raise MissingWebIdentityDependencyError(
        "To use web identity tokens, the STS token exchange module must be installed."
    )


def web_identity_factory() -> WebIdentityCredentialsResolverFactory:
    """Look up and construct the registered web identity factory.

    :raises MissingWebIdentityDependencyError: If no factory is registered.
    :raises WebIdentityFactoryConstructionError: If the registered constructor
        fails.
    """
    constructor = _find_constructor(WEB_IDENTITY_FACTORY)
    try:
        return constructor()
    except Exception as e:
        raise WebIdentityFactoryConstructionError(
            "Failed to create a web identity token credentials provider."
        ) from e


def resolve_web_identity_token(path: str | os.PathLike[str]) -> str:
    """Read a JWT web identity token from a file.

    The contents are decoded as UTF-8 and returned unaltered. Errors opening,
    reading, or decoding the file are propagated.

    :param path: The absolute path to the token file.
    :raises InvalidTokenFilePathError: If the path is not absolute.
    """
    file_path = Path(path)
    if not file_path.is_absolute():
        raise InvalidTokenFilePathError(
            "Web identity token file path must be an absolute file path"
        )

    stream = file_path.open("rb")
    try:
        return stream.read().decode("utf-8")
    finally:
        try:
            stream.close()
        except Exception as e:
            logger.debug("Failed to close token file %s: %s", file_path, e)
