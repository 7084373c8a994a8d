"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .._http import S3Request


@runtime_checkable
class Signer(Protocol):
    """Adds authorization material to a request in place."""

    def sign(self, *, request: "S3Request") -> None: ...
