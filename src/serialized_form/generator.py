"""Drive a PageAssembler through the Serialized Form call sequence."""

from dataclasses import dataclass

from loguru import logger

from serialized_form.assembler import PageAssembler
from serialized_form.config import MSG_SERIAL_VERSION_UID
from serialized_form.core.importer.manifest import Manifest, PackageEntry
from serialized_form.models.node import ClassDescriptor, DocumentNode
from serialized_form.protocols import MessagesProtocol


@dataclass(frozen=True)
class GenerationStats:
    """Summary of a generated page."""

    packages: int
    classes: int
    linked_classes: int


def _build_class(
    assembler: PageAssembler, cls: ClassDescriptor, messages: MessagesProtocol
) -> DocumentNode:
    class_tree = assembler.build_class_header(cls)
    class_content = assembler.open_class_content()

    if cls.serial_version_uid is not None:
        uid_block = assembler.serial_uid_block()
        assembler.add_serial_uid(
            uid_block, messages.get_text(MSG_SERIAL_VERSION_UID), cls.serial_version_uid
        )
        class_content.append(uid_block)

    for writer in (assembler.method_writer_for(cls), assembler.field_writer_for(cls)):
        section = writer.build_section()
        if section is not None:
            class_content.append(section)

    if class_content.children:
        class_tree.append(class_content)
    return class_tree


def _build_package(
    assembler: PageAssembler, package: PackageEntry, messages: MessagesProtocol
) -> DocumentNode:
    package_section = assembler.open_package_section()
    package_section.append(assembler.build_package_heading(package.name))
    class_section = assembler.open_class_section()
    for cls in package.classes:
        class_section.append(_build_class(assembler, cls, messages))
    return package_section.append(class_section)


def generate_serialized_form(
    assembler: PageAssembler,
    manifest: Manifest,
    messages: MessagesProtocol,
) -> GenerationStats:
    """Build the whole page for a manifest and hand it off.

    Any failure propagates before hand-off, so no partial page is ever printed.

    Args:
        assembler: A fresh assembler; it is finalized on success.
        manifest: Packages and classes to document.
        messages: Resource bundle for labels.

    Returns:
        GenerationStats for the handed-off page.
    """
    assembler.open_header(manifest.title)
    summaries = assembler.open_summaries_section()

    packages = 0
    classes = 0
    for package in manifest.packages:
        if not package.classes:
            logger.debug("Skipping package {} without serializable classes", package.name)
            continue
        assembler.add_package_section(summaries, _build_package(assembler, package, messages))
        packages += 1
        classes += len(package.classes)

    assembler.attach_serialized_content(summaries)
    assembler.close_footer()
    assembler.hand_off()

    linked = sum(1 for cls in manifest.iter_classes() if assembler.is_visible_class(cls))
    logger.info("Serialized form: {} packages, {} classes ({} linked)", packages, classes, linked)
    return GenerationStats(packages=packages, classes=classes, linked_classes=linked)
