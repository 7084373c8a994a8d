"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import dataclasses

import pytest

from s3_signers import S3CredentialIdentity


class TestS3CredentialIdentity:
    def test_from_environment(self):
        identity = S3CredentialIdentity.from_environment(
            {"S3_ACCESS_KEY": "AK", "S3_SECRET_KEY": "SK"}
        )
        assert identity == S3CredentialIdentity(access_key_id="AK", secret_access_key="SK")
        assert identity.session_token is None

    def test_from_environment_with_token(self):
        identity = S3CredentialIdentity.from_environment(
            {"S3_ACCESS_KEY": "AK", "S3_SECRET_KEY": "SK", "S3_SECURITY_TOKEN": "TOK"}
        )
        assert identity is not None
        assert identity.session_token == "TOK"

    @pytest.mark.parametrize(
        "environ",
        [{}, {"S3_ACCESS_KEY": "AK"}, {"S3_ACCESS_KEY": "AK", "S3_SECRET_KEY": ""}],
    )
    def test_from_environment_incomplete(self, environ: dict[str, str]):
        assert S3CredentialIdentity.from_environment(environ) is None

    def test_from_process_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("S3_ACCESS_KEY", "ENVAK")
        monkeypatch.setenv("S3_SECRET_KEY", "ENVSK")
        monkeypatch.delenv("S3_SECURITY_TOKEN", raising=False)

        identity = S3CredentialIdentity.from_environment()
        assert identity is not None
        assert identity.access_key_id == "ENVAK"

    def test_empty_keys_allowed_at_construction(self):
        identity = S3CredentialIdentity(access_key_id="", secret_access_key="")
        assert not identity.is_complete

    def test_read_only(self):
        identity = S3CredentialIdentity(access_key_id="AK", secret_access_key="SK")
        with pytest.raises(dataclasses.FrozenInstanceError):
            identity.access_key_id = "OTHER"  # type: ignore[misc]
