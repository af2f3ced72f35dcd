#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from datetime import UTC, datetime, timedelta, timezone

import pytest
from smithy_aws_credentials.identity import AWSCredentialsIdentity


def test_basic_credentials_have_no_session_token():
    credentials = AWSCredentialsIdentity(
        access_key_id="akid", secret_access_key="secret"
    )
    assert credentials.session_token is None
    assert credentials.expiration is None
    assert not credentials.is_expired


@pytest.mark.parametrize(
    "kwargs",
    [
        {"access_key_id": "", "secret_access_key": "secret"},
        {"access_key_id": "akid", "secret_access_key": ""},
        {"access_key_id": "akid", "secret_access_key": "secret", "session_token": ""},
    ],
)
def test_empty_values_rejected(kwargs: dict[str, str]):
    with pytest.raises(ValueError):
        AWSCredentialsIdentity(**kwargs)


def test_expiration_normalized_to_utc():
    expiration = datetime(2030, 1, 1, 12, tzinfo=timezone(timedelta(hours=2)))
    credentials = AWSCredentialsIdentity(
        access_key_id="akid",
        secret_access_key="secret",
        session_token="session",
        expiration=expiration,
    )
    assert credentials.expiration == datetime(2030, 1, 1, 10, tzinfo=UTC)
    assert credentials.expiration.tzinfo == UTC


def test_naive_expiration_assumed_utc():
    credentials = AWSCredentialsIdentity(
        access_key_id="akid",
        secret_access_key="secret",
        expiration=datetime(2000, 1, 1),
    )
    assert credentials.expiration == datetime(2000, 1, 1, tzinfo=UTC)
    assert credentials.is_expired
