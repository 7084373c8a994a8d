"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import base64
import hmac
import logging
from dataclasses import dataclass
from hashlib import sha1
from operator import itemgetter
from urllib.parse import parse_qsl

from ._http import Field, S3Request
from ._identity import S3CredentialIdentity
from .exceptions import MissingCredentialsError, SigningError

logger = logging.getLogger(__name__)

HMAC_V1_SCHEME: str = "AWS"
DEFAULT_DOMAIN: str = "s3.amazonaws.com"
AMZ_HEADER_PREFIX: str = "x-amz-"
AMZ_DATE_HEADER: str = "X-Amz-Date"
SECURITY_TOKEN_HEADER: str = "X-Amz-Security-Token"

# Query parameters that select a different operation on the same resource.
SIGNED_SUBRESOURCES: frozenset[str] = frozenset(
    (
        "acl",
        "cors",
        "delete",
        "lifecycle",
        "location",
        "logging",
        "notification",
        "partNumber",
        "policy",
        "requestPayment",
        "response-cache-control",
        "response-content-disposition",
        "response-content-encoding",
        "response-content-language",
        "response-content-type",
        "response-expires",
        "restore",
        "tagging",
        "torrent",
        "uploadId",
        "uploads",
        "versionId",
        "versioning",
        "versions",
        "website",
    )
)


@dataclass(kw_only=True, frozen=True)
class Configuration:
    """Service-specific parameters of the signing scheme.

    ``domain`` is the root domain used to recognise virtual-host-style
    requests. Set it to ``None`` for path-style endpoints where the bucket is
    already part of the URL path.
    """

    scheme: str = HMAC_V1_SCHEME
    domain: str | None = DEFAULT_DOMAIN
    header_prefix: str = AMZ_HEADER_PREFIX
    date_header: str = AMZ_DATE_HEADER
    security_token_header: str = SECURITY_TOKEN_HEADER
    subresources: frozenset[str] = SIGNED_SUBRESOURCES


_default_identity: S3CredentialIdentity | None = None


def set_default_identity(identity: S3CredentialIdentity | None) -> None:
    """Install the identity used by signers that were not given one.

    This is process-wide state. Set it once during start-up, before any
    request is signed concurrently.
    """
    global _default_identity
    _default_identity = identity


def get_default_identity() -> S3CredentialIdentity | None:
    return _default_identity


class HmacV1Signer:
    """
    Request signer for the HMAC-SHA1 ``Authorization: AWS key:signature`` scheme
    spoken by S3 and S3-compatible object stores.
    """

    def __init__(
        self,
        *,
        identity: S3CredentialIdentity | None = None,
        config: Configuration | None = None,
    ):
        self._identity = identity
        self._config = config if config is not None else Configuration()

    @property
    def config(self) -> Configuration:
        return self._config

    def sign(
        self,
        *,
        request: S3Request,
        identity: S3CredentialIdentity | None = None,
    ) -> None:
        """Add an ``Authorization`` field to ``request`` in place.

        If the resolved identity carries a session token, the security token
        field is set first. It is not part of the string to sign.

        :param request: The request to sign. Its fields are modified.
        :param identity: Credentials overriding the signer's own and the
            process-wide default.
        :raises MissingCredentialsError: if no complete identity is available.
        :raises SigningError: if the request cannot be canonicalized.
        """
        identity = self._resolve_identity(identity=identity)
        if identity.session_token:
            request.fields.set_field(
                Field(
                    name=self._config.security_token_header,
                    values=[identity.session_token],
                )
            )
        elif self._config.security_token_header in request.fields:
            request.fields.remove_field(self._config.security_token_header)

        try:
            string_to_sign = self.string_to_sign(request=request)
            logger.debug("StringToSign:\n%s", string_to_sign)
            signature = self.signature(
                string_to_sign=string_to_sign,
                secret_key=identity.secret_access_key,
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise SigningError(f"cannot compute signature: {e}") from e

        request.fields.set_field(
            self.generate_authorization_field(
                access_key_id=identity.access_key_id, signature=signature
            )
        )

    def generate_authorization_field(
        self, *, access_key_id: str, signature: str
    ) -> Field:
        """Generate the `Authorization` field"""
        return Field(
            name="Authorization",
            values=[f"{self._config.scheme} {access_key_id}:{signature}"],
        )

    def signature(self, *, string_to_sign: str, secret_key: str) -> str:
        """Sign the string to sign.

        The HMAC-SHA1 digest of the string to sign, keyed with the secret
        access key, is base64 encoded for transport in a header.
        """
        digest = hmac.new(
            key=secret_key.encode(), msg=string_to_sign.encode(), digestmod=sha1
        ).digest()
        return base64.b64encode(digest).decode()

    def string_to_sign(self, *, request: S3Request) -> str:
        """Build the canonical string covered by the signature.

        Layout::

            <METHOD>\\n
            <Content-MD5>\\n
            <Content-Type>\\n
            <Date>\\n
            <canonicalized custom headers, one per line>
            <canonicalized resource>

        The date line is left empty when the service date header is present,
        since that header is then covered as a custom header.
        """
        fields = request.fields
        if self._config.date_header in fields:
            date = ""
        elif "Date" in fields:
            date = fields.get("Date", "")
        else:
            raise SigningError(
                f"Cannot sign a request without a Date or "
                f"{self._config.date_header} field."
            )
        return (
            f"{request.method.upper()}\n"
            f"{fields.get('Content-MD5', '')}\n"
            f"{fields.get('Content-Type', '')}\n"
            f"{date}\n"
            f"{self._format_canonical_fields(request=request)}"
            f"{self._format_canonical_resource(request=request)}"
        )

    def _resolve_identity(
        self, *, identity: S3CredentialIdentity | None
    ) -> S3CredentialIdentity:
        for candidate in (identity, self._identity, get_default_identity()):
            if candidate is not None:
                break
        else:
            raise MissingCredentialsError(
                "No credentials were provided to the signer and no default "
                "identity is configured."
            )
        if not candidate.is_complete:
            raise MissingCredentialsError(
                "Credentials must include both an access key id and a secret "
                "access key."
            )
        return candidate

    def _format_canonical_fields(self, *, request: S3Request) -> str:
        prefix = self._config.header_prefix.lower()
        excluded = self._config.security_token_header.lower()
        canonical_fields: dict[str, list[str]] = {}
        for fld in request.fields:
            name = fld.name.lower()
            if not name.startswith(prefix) or name == excluded:
                continue
            canonical_fields.setdefault(name, []).extend(
                value.strip() for value in fld.values
            )
        return "".join(
            f"{name}:{','.join(values)}\n"
            for name, values in sorted(canonical_fields.items())
        )

    def _format_canonical_resource(self, *, request: S3Request) -> str:
        uri = request.destination
        return (
            f"{self._format_bucket(host=uri.host)}"
            f"{uri.path or '/'}"
            f"{self._format_subresources(query=uri.query)}"
        )

    def _format_bucket(self, *, host: str) -> str:
        domain = self._config.domain
        if domain is None:
            return ""
        host = host.lower().partition(":")[0]
        if host == domain or not host:
            return ""
        if host.endswith(f".{domain}"):
            # Bucket names may themselves contain dots.
            return f"/{host[: -len(domain) - 1]}"
        # CNAME: the whole host is the bucket.
        return f"/{host}"

    def _format_subresources(self, *, query: str | None) -> str:
        if not query:
            return ""
        # Values are signed decoded, exactly as the service will read them.
        subresources = sorted(
            (
                (key, value)
                for key, value in parse_qsl(query, keep_blank_values=True)
                if key in self._config.subresources
            ),
            key=itemgetter(0),
        )
        if not subresources:
            return ""
        return "?" + "&".join(
            f"{key}={value}" if value else key for key, value in subresources
        )
