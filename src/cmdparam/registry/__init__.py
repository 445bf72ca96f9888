# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parameter registry."""

from cmdparam.registry.registry import (
    AliasConflictError,
    RegistrationError,
    Registry,
    canonical_aliases,
)

__all__ = [
    "AliasConflictError",
    "RegistrationError",
    "Registry",
    "canonical_aliases",
]
