"""
Error hierarchy for doclifecycle.
"""


class DocLifecycleError(RuntimeError):
    """Base error for doclifecycle failures."""


class HookRegistrationError(DocLifecycleError):
    """Raised when a hook targets an unknown operation or is not callable."""


class ModelConfigurationError(DocLifecycleError):
    """Raised when a document model class is misconfigured."""


class ModelNotRegisteredError(DocLifecycleError):
    """Raised when resolving a model name that was never registered."""


class LifecycleConfigurationError(DocLifecycleError):
    """Raised when lifecycle options cannot be parsed."""
