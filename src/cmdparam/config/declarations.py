# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""YAML declarations of command-line parameters.

A declaration file lists the parameters of a program so the registry can be
built without code::

    version: "tool 1.2.0"
    strict-aliases: false
    parameters:
      - name: path
        type: path
        default: ./hello.txt
        description: file path
        aliases: ["-p"]
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cmdparam.model.types import ParameterType, make_value
from cmdparam.registry.registry import RegistrationError, Registry

# ###############
# Public Interface
# ###############


class DeclarationError(Exception):
    """Raised when a declaration file cannot be read or is invalid."""


class ParameterDeclaration(BaseModel):
    """Declaration of a single parameter."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    type: ParameterType
    allow_empty: bool = Field(alias="allow-empty", default=False)
    default: bool | int | float | str | None = None
    description: str = ""
    aliases: list[str] = Field(default_factory=list)


class Declarations(BaseModel):
    """Top-level model of a declaration file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    version: str | None = None
    strict_aliases: bool = Field(alias="strict-aliases", default=False)
    parameters: list[ParameterDeclaration] = Field(default_factory=list)


def load_declarations(path: Path) -> Declarations:
    """Load and validate a declaration file.

    Args:
        path: Path to the YAML declaration file.

    Returns:
        The validated Declarations.

    Raises:
        DeclarationError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DeclarationError(f"Declaration file not found: {path}") from None
    except OSError as exc:
        raise DeclarationError(f"Cannot read declaration file '{path}': {exc}") from exc

    return parse_declarations(text, source_label=str(path))


def parse_declarations(text: str, source_label: str = "<string>") -> Declarations:
    """Parse declaration YAML text.

    An empty document declares no parameters.

    Raises:
        DeclarationError: If the YAML is invalid or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DeclarationError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DeclarationError(f"{source_label}: declarations must be a YAML mapping")

    try:
        return Declarations.model_validate(data)
    except ValidationError as exc:
        raise DeclarationError(f"Invalid declarations in {source_label}: {exc}") from exc


def build_registry(declarations: Declarations) -> Registry:
    """Create a registry holding every declared parameter.

    Raises:
        DeclarationError: If a default does not fit its parameter's type or a
            declaration is rejected by the registry.
    """
    registry = Registry(strict_aliases=declarations.strict_aliases)
    if declarations.version is not None:
        registry.set_version_text(declarations.version)

    for index, decl in enumerate(declarations.parameters):
        location = f"parameters[{index}] '{decl.name}'"
        default = None
        if decl.default is not None:
            try:
                default = make_value(decl.type, decl.default)
            except ValueError as exc:
                raise DeclarationError(f"{location}: invalid default: {exc}") from exc
        try:
            registry.register(decl.name, decl.type, decl.allow_empty, default, decl.description, decl.aliases)
        except RegistrationError as exc:
            raise DeclarationError(f"{location}: {exc}") from exc
    return registry
