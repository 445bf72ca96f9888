# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declarative parameter configuration."""

from cmdparam.config.declarations import (
    DeclarationError,
    Declarations,
    ParameterDeclaration,
    build_registry,
    load_declarations,
    parse_declarations,
)

__all__ = [
    "DeclarationError",
    "Declarations",
    "ParameterDeclaration",
    "build_registry",
    "load_declarations",
    "parse_declarations",
]
