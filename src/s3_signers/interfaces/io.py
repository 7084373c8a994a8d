"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Seekable(Protocol):
    """A file-like object with random access."""

    def seek(self, offset: int, whence: int = 0, /) -> int:
        """Move the stream position and return the new absolute position."""
        ...

    def tell(self) -> int:
        """Return the current stream position."""
        ...
