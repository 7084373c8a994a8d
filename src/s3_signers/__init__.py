"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0

S3 Signers signs requests for S3-compatible object stores with the HMAC-SHA1
``Authorization: AWS <key>:<signature>`` scheme and sends them through a
pluggable HTTP transport.
"""

from __future__ import annotations

from ._http import URI, Field, Fields, S3Request
from ._identity import S3CredentialIdentity
from ._version import __version__
from .client import Client
from .signers import (
    Configuration,
    HmacV1Signer,
    get_default_identity,
    set_default_identity,
)

__license__ = "Apache-2.0"
__version__ = __version__

__all__ = (
    "Client",
    "Configuration",
    "Field",
    "Fields",
    "HmacV1Signer",
    "S3CredentialIdentity",
    "S3Request",
    "URI",
    "get_default_identity",
    "set_default_identity",
)
