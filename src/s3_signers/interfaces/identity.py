"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import Protocol


class Identity(Protocol):
    """An entity available to the client representing who the user is."""

    access_key_id: str
