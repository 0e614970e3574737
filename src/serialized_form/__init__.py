"""Assembly of the Serialized Form page of generated API documentation."""

from serialized_form.assembler import PageAssembler, PageState
from serialized_form.core.visibility import VisibilityOracle
from serialized_form.errors import (
    ContractViolation,
    DocumentOutputFailure,
    ManifestError,
    SerializedFormError,
    SuperclassCycleError,
)
from serialized_form.models.node import ClassDescriptor, DocumentNode, LinkKind, Role, Style
from serialized_form.protocols import (
    ConfigurationProtocol,
    LinkResolverProtocol,
    MessagesProtocol,
    NavigationProtocol,
    PrinterProtocol,
)

__all__ = [
    "ClassDescriptor",
    "ConfigurationProtocol",
    "ContractViolation",
    "DocumentNode",
    "DocumentOutputFailure",
    "LinkKind",
    "LinkResolverProtocol",
    "ManifestError",
    "MessagesProtocol",
    "NavigationProtocol",
    "PageAssembler",
    "PageState",
    "PrinterProtocol",
    "Role",
    "SerializedFormError",
    "Style",
    "SuperclassCycleError",
    "VisibilityOracle",
]
