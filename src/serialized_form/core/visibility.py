"""Decide which classes are part of the documented set."""

from loguru import logger

from serialized_form.models.node import ClassDescriptor
from serialized_form.protocols import ConfigurationProtocol


class VisibilityOracle:
    """Answer whether a class can be the target of a link.

    A class is visible when it is among the included types and documentation was
    generated for it. Both lookups are repeated on every query.
    """

    def __init__(self, configuration: ConfigurationProtocol) -> None:
        self._configuration = configuration

    def is_visible(self, cls: ClassDescriptor) -> bool:
        visible = cls in self._configuration.included_types() and self._configuration.is_generated_doc(
            cls
        )
        logger.trace("Visibility of {}: {}", cls.qualified_name, visible)
        return visible
