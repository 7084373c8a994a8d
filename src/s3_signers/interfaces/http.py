"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .._http import S3Request


@runtime_checkable
class HTTPTransport(Protocol):
    """Sends a prepared and signed request over the network.

    Implementations return their native response object and raise their native
    exceptions. Neither is inspected or wrapped by the client.
    """

    def send(self, request: "S3Request") -> Any: ...
