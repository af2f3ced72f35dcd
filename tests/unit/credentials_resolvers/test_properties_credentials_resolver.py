#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import pytest
from smithy_aws_credentials import settings
from smithy_aws_credentials.credentials_resolvers import PropertiesCredentialsResolver
from smithy_aws_credentials.exceptions import MissingCredentialsError


@pytest.mark.asyncio
async def test_reads_system_properties(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(
        settings,
        "SYSTEM_PROPERTIES",
        {"aws.accessKeyId": "akid", "aws.secretAccessKey": "secret"},
    )

    credentials = await PropertiesCredentialsResolver().get_identity(properties={})
    assert credentials.access_key_id == "akid"
    assert credentials.secret_access_key == "secret"
    assert credentials.session_token is None


@pytest.mark.asyncio
async def test_session_token_property():
    resolver = PropertiesCredentialsResolver(
        {
            "aws.accessKeyId": " akid ",
            "aws.secretAccessKey": " secret ",
            "aws.sessionToken": " tok ",
        }
    )

    credentials = await resolver.get_identity(properties={})
    assert credentials.access_key_id == "akid"
    assert credentials.secret_access_key == "secret"
    assert credentials.session_token == "tok"


@pytest.mark.asyncio
async def test_secret_missing_names_property():
    resolver = PropertiesCredentialsResolver({"aws.accessKeyId": "akid"})

    with pytest.raises(MissingCredentialsError, match="aws.secretAccessKey"):
        await resolver.get_identity(properties={})


@pytest.mark.asyncio
async def test_environment_ignored(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "akid")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")

    with pytest.raises(MissingCredentialsError):
        await PropertiesCredentialsResolver({}).get_identity(properties={})
