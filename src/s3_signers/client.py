"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import datetime
import logging
import re
from collections.abc import Callable, Iterable, Mapping
from email.utils import format_datetime
from io import BytesIO
from typing import Any
from urllib.parse import urlsplit

from requests.utils import requote_uri

from ._http import URI, Field, Fields, S3Request
from ._io import find_content_length
from .exceptions import RequestConstructionError, SigningError
from .interfaces.auth import Signer
from .interfaces.http import HTTPTransport
from .signers import AMZ_DATE_HEADER, HmacV1Signer
from .transport import RequestsTransport

logger = logging.getLogger(__name__)

# RFC 9110 token characters.
_METHOD_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def _utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def format_http_date(instant: datetime.datetime) -> str:
    """Format ``instant`` as an HTTP date, e.g. ``Mon, 02 Jan 2006 15:04:05 GMT``.

    Naive datetimes are taken to be UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=datetime.timezone.utc)
    return format_datetime(instant.astimezone(datetime.timezone.utc), usegmt=True)


class Client:
    """Sign and send requests to an S3-compatible service.

    Every collaborator is optional and resolved once here: ``signer`` defaults
    to an :class:`HmacV1Signer` using the process-wide default identity,
    ``clock`` to the current UTC time and ``transport`` to a
    :class:`~s3_signers.transport.RequestsTransport`. ``date_header`` names the
    service date field that makes a ``Date`` field unnecessary; it defaults to
    the one configured on an :class:`HmacV1Signer`, else ``X-Amz-Date``.
    """

    def __init__(
        self,
        *,
        signer: Signer | None = None,
        clock: Callable[[], datetime.datetime] | None = None,
        transport: HTTPTransport | None = None,
        date_header: str | None = None,
    ):
        if signer is None:
            signer = HmacV1Signer()
        if date_header is None:
            if isinstance(signer, HmacV1Signer):
                date_header = signer.config.date_header
            else:
                date_header = AMZ_DATE_HEADER
        self._signer = signer
        self._date_header = date_header
        self._clock = clock if clock is not None else _utc_now
        self._transport = transport if transport is not None else RequestsTransport()

    def get(self, url: str) -> Any:
        """Send a signed GET request for ``url``."""
        return self.dispatch(self.new_request("GET", url))

    def put(self, url: str, body: Iterable[bytes] | bytes | None) -> Any:
        """Send a signed PUT request uploading ``body`` to ``url``."""
        return self.dispatch(self.new_request("PUT", url, body=body))

    def new_request(
        self,
        method: str,
        url: str,
        *,
        body: Iterable[bytes] | bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> S3Request:
        """Build an :class:`S3Request` from a method and an absolute URL.

        :raises RequestConstructionError: if the method is not a valid HTTP
            token or the URL lacks a scheme or host.
        """
        if not isinstance(method, str) or not _METHOD_RE.fullmatch(method):
            raise RequestConstructionError(f"invalid method {method!r}")
        try:
            parts = urlsplit(url)
            port = parts.port
            # Signed exactly as requests will put it on the request line.
            path = requote_uri(parts.path) if parts.path else None
        except (TypeError, ValueError) as e:
            raise RequestConstructionError(f"invalid url {url!r}: {e}") from e
        if not parts.scheme or not parts.hostname:
            raise RequestConstructionError(
                f"invalid url {url!r}: scheme and host are required"
            )
        if isinstance(body, bytes):
            body = BytesIO(body)
        return S3Request(
            destination=URI(
                scheme=parts.scheme,
                host=parts.hostname,
                port=port,
                path=path,
                query=parts.query or None,
                fragment=parts.fragment or None,
            ),
            method=method,
            body=body,
            fields=Fields.from_mapping(headers),
        )

    def dispatch(self, request: S3Request) -> Any:
        """Prepare, sign and send ``request``.

        Before signing, the ``Date`` field is set from the clock unless the
        request already has ``Date`` or the service date field, and a zero or
        missing ``Content-Length`` is replaced by the length of a seekable
        body. The transport's response and exceptions are returned unchanged.

        :raises SeekError: if the body length cannot be probed.
        :raises SigningError: if signing fails. The request is not sent.
        """
        self._prepare(request)
        try:
            self._signer.sign(request=request)
        except SigningError as e:
            raise SigningError(f"sign request: {e}") from e
        logger.debug("Dispatching %s %s", request.method, request.destination.build())
        return self._transport.send(request)

    def _prepare(self, request: S3Request) -> None:
        fields = request.fields
        if fields.get("Content-Length", "0") == "0" and request.body is not None:
            length = find_content_length(request.body)
            if length is not None:
                fields.set_field(Field(name="Content-Length", values=[str(length)]))
        if "Date" not in fields and self._date_header not in fields:
            fields.set_field(
                Field(name="Date", values=[format_http_date(self._clock())])
            )
