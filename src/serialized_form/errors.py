"""Error kinds raised while assembling the Serialized Form page."""


class SerializedFormError(Exception):
    """Base class for all errors raised by this package."""


class ContractViolation(SerializedFormError, RuntimeError):
    """A caller broke the assembly contract (wrong state, reused node, missing class)."""


class DocumentOutputFailure(SerializedFormError):
    """The finished page could not be handed to the printer."""

    def __init__(self, msg: str, *, cause: BaseException | None = None) -> None:
        super().__init__(msg)
        self.cause = cause


class SuperclassCycleError(SerializedFormError, ValueError):
    """A superclass chain loops back on itself."""


class ManifestError(SerializedFormError, ValueError):
    """The input manifest is malformed."""
