"""Parse serialized-form manifests (JSON) into domain models."""

import json
from collections.abc import Iterator, Set
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from serialized_form.config import DEFAULT_TITLE
from serialized_form.errors import ManifestError
from serialized_form.models.node import ClassDescriptor, SerialField, SerialMethod


@dataclass(frozen=True)
class PackageEntry:
    """A package and its serializable classes, in manifest order."""

    name: str
    classes: tuple[ClassDescriptor, ...]


@dataclass(frozen=True)
class Manifest:
    """Everything needed to render one Serialized Form page."""

    title: str
    packages: tuple[PackageEntry, ...]
    included: frozenset[ClassDescriptor]
    generated: frozenset[ClassDescriptor]
    display_names: dict[str, str] = field(default_factory=dict)

    def iter_classes(self) -> Iterator[ClassDescriptor]:
        for package in self.packages:
            yield from package.classes


class ManifestConfiguration:
    """Answer configuration queries from a parsed manifest."""

    def __init__(self, manifest: Manifest) -> None:
        self.manifest = manifest

    def included_types(self) -> Set[ClassDescriptor]:
        return self.manifest.included

    def is_generated_doc(self, cls: ClassDescriptor) -> bool:
        return cls in self.manifest.generated

    def display_name(self, cls: ClassDescriptor) -> str:
        return self.manifest.display_names.get(cls.qualified_name, cls.simple_name)


def _field_type(
    type_name: str,
    raw_classes: dict[str, dict[str, Any]],
    descriptors: dict[str, ClassDescriptor],
) -> ClassDescriptor | None:
    # Only qualified names can refer to documented classes; primitives never link.
    if "." not in type_name:
        return None
    if type_name in descriptors:
        return descriptors[type_name]
    # Not built yet (or the class itself): same identity as the manifest entry.
    raw = raw_classes.get(type_name, {})
    return ClassDescriptor(type_name, symbol=raw.get("symbol"))


def _parse_field(
    raw: dict[str, Any],
    raw_classes: dict[str, dict[str, Any]],
    descriptors: dict[str, ClassDescriptor],
) -> SerialField:
    type_name = raw["type"]
    field_type = _field_type(type_name, raw_classes, descriptors)
    return SerialField(
        name=raw["name"],
        type_name=type_name,
        type=field_type,
        description=raw.get("description", ""),
    )


def _parse_method(raw: dict[str, Any]) -> SerialMethod:
    return SerialMethod(
        name=raw["name"],
        signature=raw.get("signature", raw["name"] + "()"),
        description=raw.get("description", ""),
    )


def _resolve_chain(
    name: str,
    raw_classes: dict[str, dict[str, Any]],
    descriptors: dict[str, ClassDescriptor],
) -> None:
    """Create descriptors for a class and every unresolved superclass above it."""
    # Walk up until a known descriptor or the top of the hierarchy, then build top-down.
    chain: list[str] = []
    current: str | None = name
    while current is not None and current not in descriptors:
        if current in chain:
            msg = f"Superclass cycle: {' -> '.join([*chain, current])}"
            raise ManifestError(msg)
        chain.append(current)
        raw = raw_classes.get(current)
        current = raw.get("superclass") if raw is not None else None

    for class_name in reversed(chain):
        raw = raw_classes.get(class_name)
        if raw is None:
            # Not listed in the manifest: a superclass outside the documented set.
            descriptors[class_name] = ClassDescriptor(class_name)
            continue
        superclass_name = raw.get("superclass")
        descriptors[class_name] = ClassDescriptor(
            qualified_name=class_name,
            superclass=descriptors[superclass_name] if superclass_name else None,
            symbol=raw.get("symbol"),
            serial_version_uid=raw.get("serialVersionUID"),
            fields=tuple(
                _parse_field(f, raw_classes, descriptors) for f in raw.get("fields", [])
            ),
            methods=tuple(_parse_method(m) for m in raw.get("methods", [])),
        )


def parse_manifest(data: dict[str, Any]) -> Manifest:
    """Parse a manifest dict into a Manifest.

    Args:
        data: Raw manifest data (as from a .json file).

    Returns:
        Manifest with classes linked to their superclass descriptors.

    Raises:
        ManifestError: On missing keys, duplicate classes or superclass cycles.
    """
    if not isinstance(data, dict) or not isinstance(data.get("packages"), list):
        msg = "Manifest must be an object with a 'packages' list"
        raise ManifestError(msg)

    raw_classes: dict[str, dict[str, Any]] = {}
    package_members: list[tuple[str, list[str]]] = []
    try:
        for raw_package in data["packages"]:
            names: list[str] = []
            for raw in raw_package.get("classes", []):
                name = raw["name"]
                if name in raw_classes:
                    msg = f"Duplicate class in manifest: {name!r}"
                    raise ManifestError(msg)
                raw_classes[name] = raw
                names.append(name)
            package_members.append((raw_package["name"], names))

        descriptors: dict[str, ClassDescriptor] = {}
        for name in raw_classes:
            _resolve_chain(name, raw_classes, descriptors)
    except KeyError as e:
        msg = f"Manifest entry is missing key {e.args[0]!r}"
        raise ManifestError(msg) from e

    packages = tuple(
        PackageEntry(name=package_name, classes=tuple(descriptors[n] for n in names))
        for package_name, names in package_members
    )
    included = frozenset(
        descriptors[name] for name, raw in raw_classes.items() if raw.get("included", True)
    )
    generated = frozenset(
        descriptors[name] for name, raw in raw_classes.items() if raw.get("documented", True)
    )
    display_names = {
        name: raw["displayName"] for name, raw in raw_classes.items() if "displayName" in raw
    }
    logger.debug(
        "Manifest parsed: {} packages, {} classes, {} external superclasses",
        len(packages),
        len(raw_classes),
        len(descriptors) - len(raw_classes),
    )
    return Manifest(
        title=data.get("title", DEFAULT_TITLE),
        packages=packages,
        included=included,
        generated=generated,
        display_names=display_names,
    )


def load_manifest(path: Path) -> Manifest:
    """Read and parse a manifest file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON in {str(path)!r}: {e}"
        raise ManifestError(msg) from e
    return parse_manifest(data)
