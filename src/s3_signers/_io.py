"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import io
from typing import Any

from .exceptions import SeekError
from .interfaces.io import Seekable


def is_seekable(body: Any) -> bool:
    """Whether ``body`` supports random access."""
    if not isinstance(body, Seekable):
        return False
    seekable = getattr(body, "seekable", None)
    if callable(seekable):
        try:
            return bool(seekable())
        except ValueError:
            # Closed io objects raise here; the seek below reports it.
            return True
    return True


def find_content_length(body: Any) -> int | None:
    """Determine how many bytes remain in ``body`` from its current position.

    Returns ``None`` when the body cannot seek and the length is unknown. The
    stream position is restored before returning.

    :raises SeekError: if any seek fails or the current position lies past the
        end of the stream.
    """
    if not is_seekable(body):
        return None
    try:
        current = body.seek(0, io.SEEK_CUR)
        end = body.seek(0, io.SEEK_END)
        body.seek(current, io.SEEK_SET)
    except (OSError, ValueError) as e:
        raise SeekError(f"cannot seek: {e}") from e
    if current > end:
        raise SeekError("cannot find length, current position is past end")
    return end - current
