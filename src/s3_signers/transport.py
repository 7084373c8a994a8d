"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging

import requests

from ._http import S3Request

logger = logging.getLogger(__name__)

# Failures raised by the default transport. They reach the caller unwrapped.
TransportError = requests.RequestException


class RequestsTransport:
    """Send signed requests with a :class:`requests.Session`."""

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float | tuple[float, float] | None = None,
    ):
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout

    def send(self, request: S3Request) -> requests.Response:
        prepared = self._session.prepare_request(self._to_requests(request))
        logger.debug("Sending %s %s", prepared.method, prepared.url)
        return self._session.send(prepared, timeout=self._timeout)

    def _to_requests(self, request: S3Request) -> requests.Request:
        headers = {fld.name: fld.as_string(delimiter=",") for fld in request.fields}
        return requests.Request(
            method=request.method,
            url=request.destination.build(),
            headers=headers,
            data=request.body,
        )
