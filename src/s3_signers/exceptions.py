"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""


class BaseS3SignersException(Exception):
    """Top-level exception to capture signing-related errors."""

    ...


class RequestConstructionError(BaseS3SignersException, ValueError):
    """A request could not be built from the supplied method or URL."""

    ...


class SeekError(BaseS3SignersException, OSError):
    """The request body could not be probed for its length."""

    ...


class SigningError(BaseS3SignersException):
    """Canonicalization or signature computation failed."""

    ...


class MissingCredentialsError(SigningError):
    """No usable credentials were available when signing was attempted."""

    ...
