#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import asyncio
import logging
from collections.abc import Callable
from typing import Any, Final, Self

from smithy_core.aio.interfaces.identity import IdentityResolver
from smithy_core.aio.utils import close

from ..exceptions import MissingCredentialsError
from ..identity import (
    AWSCredentialsIdentity,
    AWSCredentialsResolver,
    AWSIdentityProperties,
)
from ..settings import ResolvedSettings, SettingsSource, SystemSetting
from ..web_identity import (
    WebIdentityCredentialsResolverFactory,
    resolve_web_identity_token,
    web_identity_factory,
)
from .static import StaticCredentialsResolver

logger: Final = logging.getLogger(__name__)


def _missing_setting_message(name: str, setting: SystemSetting) -> str:
    return (
        f"Unable to load credentials from system settings. {name} must be specified "
        f"either via environment variable ({setting.environment_variable}) or system "
        f"property ({setting.property})."
    )


class SystemSettingsCredentialsResolver(
    IdentityResolver[AWSCredentialsIdentity, AWSIdentityProperties]
):
    """Resolves AWS Credentials from system settings.

    The settings are read from the given :py:class:`SettingsSource` the first time
    credentials are requested, and are used to pick the resolver that every request
    is delegated to afterwards:

    1. If both a web identity token file and a role ARN are set, the token is
       exchanged for credentials by the registered web identity factory.
    2. Otherwise, if a session token is set, static session credentials are used.
    3. Otherwise, static basic credentials are used.

    An access key and a secret key are required in every case.

    Concurrent first calls on a single event loop resolve the settings once. An
    instance must not be shared across event loops or threads.
    """

    def __init__(
        self,
        settings_source: SettingsSource,
        *,
        factory_loader: Callable[
            [], WebIdentityCredentialsResolverFactory
        ] = web_identity_factory,
    ) -> None:
        """Construct a SystemSettingsCredentialsResolver.

        :param settings_source: The source to read credential settings from.
        :param factory_loader: Loads the factory used to build web identity
            credentials resolvers.
        """
        self._settings_source = settings_source
        self._factory_loader = factory_loader
        self._credentials_resolver: AWSCredentialsResolver | None = None
        self._resolve_lock = asyncio.Lock()
        self._closed = False

    async def get_identity(
        self, *, properties: AWSIdentityProperties
    ) -> AWSCredentialsIdentity:
        if self._credentials_resolver is None:
            await self._resolve()
        assert self._credentials_resolver is not None  # noqa: S101
        return await self._credentials_resolver.get_identity(properties=properties)

    async def _resolve(self) -> None:
        async with self._resolve_lock:
            if self._credentials_resolver is not None:
                return
            self._credentials_resolver = await self._build_resolver()

    async def _build_resolver(self) -> AWSCredentialsResolver:
        settings = ResolvedSettings.from_source(self._settings_source)

        if settings.access_key_id is None:
            raise MissingCredentialsError(
                _missing_setting_message("Access key", SystemSetting.AWS_ACCESS_KEY_ID)
            )
        if settings.secret_access_key is None:
            raise MissingCredentialsError(
                _missing_setting_message(
                    "Secret key", SystemSetting.AWS_SECRET_ACCESS_KEY
                )
            )

        if (
            settings.web_identity_token_file is not None
            and settings.role_arn is not None
        ):
            logger.debug(
                "Resolving web identity credentials for role %s.", settings.role_arn
            )
            token = await asyncio.to_thread(
                resolve_web_identity_token, settings.web_identity_token_file
            )
            factory = self._factory_loader()
            return factory.create(settings.role_arn, settings.role_session_name, token)

        if settings.session_token is not None:
            logger.debug("Resolved session credentials from system settings.")
            credentials = AWSCredentialsIdentity(
                access_key_id=settings.access_key_id,
                secret_access_key=settings.secret_access_key,
                session_token=settings.session_token,
            )
        else:
            logger.debug("Resolved basic credentials from system settings.")
            credentials = AWSCredentialsIdentity(
                access_key_id=settings.access_key_id,
                secret_access_key=settings.secret_access_key,
            )
        return StaticCredentialsResolver(credentials=credentials)

    async def close(self) -> None:
        """Close the resolver that credentials were delegated to, if it can be closed.

        Errors raised while closing are logged and suppressed. Calling this more than
        once, or before credentials were resolved, does nothing.
        """
        if self._closed or self._credentials_resolver is None:
            return
        self._closed = True

        try:
            await close(self._credentials_resolver)
        except Exception as e:
            logger.debug(
                "Failed to close credentials resolver %s: %s",
                type(self._credentials_resolver),
                e,
            )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type: Any, exc_value: Any, traceback: Any):
        await self.close()
