"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .interfaces.identity import Identity

ACCESS_KEY_ENV_VAR = "S3_ACCESS_KEY"
SECRET_KEY_ENV_VAR = "S3_SECRET_KEY"
SECURITY_TOKEN_ENV_VAR = "S3_SECURITY_TOKEN"


@dataclass(kw_only=True, frozen=True)
class S3CredentialIdentity(Identity):
    access_key_id: str
    secret_access_key: str
    session_token: str | None = None

    @property
    def is_complete(self) -> bool:
        """Whether both halves of the key pair are present."""
        return bool(self.access_key_id) and bool(self.secret_access_key)

    @classmethod
    def from_environment(
        cls, environ: Mapping[str, str] | None = None
    ) -> "S3CredentialIdentity | None":
        """Build an identity from ``S3_ACCESS_KEY`` and ``S3_SECRET_KEY``.

        ``S3_SECURITY_TOKEN`` is picked up when set. Returns ``None`` if
        either key is missing so callers can fall back to another source.
        """
        if environ is None:
            environ = os.environ
        access_key_id = environ.get(ACCESS_KEY_ENV_VAR)
        secret_access_key = environ.get(SECRET_KEY_ENV_VAR)
        if not access_key_id or not secret_access_key:
            return None
        return cls(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=environ.get(SECURITY_TOKEN_ENV_VAR) or None,
        )
