#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Self

SYSTEM_PROPERTIES: dict[str, str] = {}
"""Process-local property store read by :py:class:`PropertySettingsSource`.

Properties are keyed by dotted names such as ``aws.accessKeyId``.
"""


class SystemSetting(Enum):
    """A setting that can be read from either an environment variable or a process
    property."""

    AWS_ACCESS_KEY_ID = ("AWS_ACCESS_KEY_ID", "aws.accessKeyId")
    AWS_SECRET_ACCESS_KEY = ("AWS_SECRET_ACCESS_KEY", "aws.secretAccessKey")
    AWS_SESSION_TOKEN = ("AWS_SESSION_TOKEN", "aws.sessionToken")
    AWS_ROLE_ARN = ("AWS_ROLE_ARN", "aws.roleArn")
    AWS_ROLE_SESSION_NAME = ("AWS_ROLE_SESSION_NAME", "aws.roleSessionName")
    AWS_WEB_IDENTITY_TOKEN_FILE = (
        "AWS_WEB_IDENTITY_TOKEN_FILE",
        "aws.webIdentityTokenFile",
    )

    def __init__(self, environment_variable: str, property_name: str) -> None:
        self.environment_variable = environment_variable
        self.property = property_name


class SettingsSource(Protocol):
    """Loads the value of a :py:class:`SystemSetting` from some source."""

    def load_setting(self, setting: SystemSetting) -> str | None:
        """Load the value of the given setting.

        :param setting: The setting to load.
        :returns: The raw value of the setting, or None if it isn't set.
        """
        ...


class EnvironmentSettingsSource:
    """Loads settings from environment variables."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load_setting(self, setting: SystemSetting) -> str | None:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(setting.environment_variable)


class PropertySettingsSource:
    """Loads settings from process properties."""

    def __init__(self, properties: Mapping[str, str] | None = None) -> None:
        self._properties = SYSTEM_PROPERTIES if properties is None else properties

    def load_setting(self, setting: SystemSetting) -> str | None:
        return self._properties.get(setting.property)


class ChainedSettingsSource:
    """Loads a setting from the first source in a sequence that has it set."""

    def __init__(self, sources: Sequence[SettingsSource]) -> None:
        self._sources = sources

    def load_setting(self, setting: SystemSetting) -> str | None:
        for source in self._sources:
            value = source.load_setting(setting)
            if value is not None:
                return value
        return None


def system_settings_source() -> ChainedSettingsSource:
    """Creates a source that checks process properties before environment
    variables."""
    return ChainedSettingsSource(
        (PropertySettingsSource(), EnvironmentSettingsSource())
    )


def _trim(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


@dataclass(frozen=True, kw_only=True)
class ResolvedSettings:
    """A snapshot of the credential settings read from a :py:class:`SettingsSource`.

    Each value has surrounding whitespace removed. Values that are absent or blank
    are None.
    """

    access_key_id: str | None = None
    secret_access_key: str | None = None
    session_token: str | None = None
    role_arn: str | None = None
    role_session_name: str | None = None
    web_identity_token_file: str | None = None

    @classmethod
    def from_source(cls, source: SettingsSource) -> Self:
        """Read every credential setting from the given source.

        :param source: The source to read settings from.
        """
        return cls(
            access_key_id=_trim(source.load_setting(SystemSetting.AWS_ACCESS_KEY_ID)),
            secret_access_key=_trim(
                source.load_setting(SystemSetting.AWS_SECRET_ACCESS_KEY)
            ),
            session_token=_trim(source.load_setting(SystemSetting.AWS_SESSION_TOKEN)),
            role_arn=_trim(source.load_setting(SystemSetting.AWS_ROLE_ARN)),
            role_session_name=_trim(
                source.load_setting(SystemSetting.AWS_ROLE_SESSION_NAME)
            ),
            web_identity_token_file=_trim(
                source.load_setting(SystemSetting.AWS_WEB_IDENTITY_TOKEN_FILE)
            ),
        )
