import json
import os
import tomllib
from importlib.resources import files
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import (
    BuildConfiguration,
    BuildTarget,
    ConfigError,
    Selector,
    SelectorKind,
    UnsupportedConfigFormatError,
)

DEFAULT_MANIFEST = "targets.yml"

PROFILE_FLAGS_ENV = "CARGO_PROFILE_FLAGS"
CARGO_ENV = "CARGO"


def load_targets(path: str | Path) -> tuple[BuildTarget, ...]:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Manifest file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Manifest path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_text(pure_path.read_text(encoding="utf-8"), fmt, str(pure_path))
    return _build_targets(raw_file)


def load_default_targets() -> tuple[BuildTarget, ...]:
    """Load the target list packaged with suzuka_build.

    The list is fixed when the package is built; nothing at runtime can
    change it.
    """
    resource = files("suzuka_build").joinpath(DEFAULT_MANIFEST)
    raw_file = _parse_text(resource.read_text(encoding="utf-8"), "yaml", DEFAULT_MANIFEST)
    return _build_targets(raw_file)


def load_build_config(
    environ: Mapping[str, str] | None = None,
    *,
    profile_flags: str | None = None,
    working_dir: str | Path | None = None,
) -> BuildConfiguration:
    env = os.environ if environ is None else environ

    if profile_flags is None:
        profile_flags = env.get(PROFILE_FLAGS_ENV, "")

    cargo = env.get(CARGO_ENV, "").strip() or "cargo"

    workdir = None
    if working_dir is not None:
        resolved = Path(working_dir).expanduser().resolve()
        if not resolved.is_dir():
            raise ConfigError(f"Working directory is not a directory: {resolved}")
        workdir = str(resolved)

    config = BuildConfiguration(
        profile_flags=profile_flags, cargo=cargo, working_dir=workdir
    )
    # Fail at startup rather than on the first invocation
    config.profile_args()
    return config


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"{path}: unsupported manifest extension '{fmt or '(none)'}'"
                " (use .yml, .yaml, .toml or .json)"
            )


def _parse_text(text: str, fmt: str, source: str) -> Mapping[str, Any]:
    match fmt:
        case "yaml":
            return _parse_yaml(text, source)
        case "toml":
            return _parse_toml(text, source)
        case "json":
            return _parse_json(text, source)
        case _:
            raise AssertionError("Unreachable")


def _parse_yaml(text: str, source: str) -> Mapping[str, Any]:
    try:
        raw_file = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"{source}: invalid YAML") from exc

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{source}: YAML parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _parse_toml(text: str, source: str) -> Mapping[str, Any]:
    try:
        raw_file = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{source}: invalid TOML") from exc

    return raw_file


def _parse_json(text: str, source: str) -> Mapping[str, Any]:
    try:
        raw_file = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{source}: invalid JSON") from exc

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{source}: JSON parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_targets(raw: Mapping[str, Any]) -> tuple[BuildTarget, ...]:
    targets: list[BuildTarget] = []
    seen: set[str] = set()

    if "targets" not in raw:
        raise ConfigError("Missing 'targets' field")

    if not isinstance(raw["targets"], list):
        raise ConfigError(f"'targets' must be a list, got {type(raw['targets'])}")

    if len(raw["targets"]) < 1:
        raise ConfigError("There must be at least one target in the manifest")

    for ordinal, fields in enumerate(raw["targets"]):
        if not isinstance(fields, Mapping):
            raise ConfigError(f"Target #{ordinal} must be a mapping")

        target = _build_target(ordinal, fields)

        if target.name in seen:
            raise ConfigError(f"Duplicate target name after normalization: {target.name}")

        seen.add(target.name)
        targets.append(target)

    return tuple(targets)


def _build_target(ordinal: int, fields: Mapping[str, Any]) -> BuildTarget:
    keys = {"name", "bin", "package"}

    for field in fields.keys():
        if field not in keys:
            raise ConfigError(f"Target #{ordinal}: Can't process: {field}")

    if "name" not in fields:
        raise ConfigError(f"Target #{ordinal}: missing 'name'")

    if not isinstance(fields["name"], str):
        raise ConfigError(f"Target #{ordinal}: The name should be a string")

    name = fields["name"].strip()

    if len(name) < 1:
        raise ConfigError(f"Target #{ordinal}: A target name can't be empty")

    kinds = [kind for kind in SelectorKind if kind.value in fields]

    if len(kinds) != 1:
        raise ConfigError(f"{name}: exactly one of 'bin' or 'package' is required")

    kind = kinds[0]
    value = fields[kind.value]

    if not isinstance(value, str):
        raise ConfigError(f"{name}: '{kind.value}' should be a string")

    if len(value.strip()) < 1:
        raise ConfigError(f"{name}: '{kind.value}' can't be empty")

    return BuildTarget(name, Selector(kind, value.strip()), ordinal)
