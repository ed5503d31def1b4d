"""clustercaps exception hierarchy.

Loading and validation failures raise a subclass of ClusterCapsError; the
CLI catches that one class and turns it into an error line and exit code.

The resolver itself never raises. These exceptions belong to the layers
around it: loading documents and validating declared specs before they are
handed to the resolver.
"""


class ClusterCapsError(Exception):
    """Base exception for all clustercaps errors."""


class ConfigError(ClusterCapsError):
    """Raised when a configuration or registry document cannot be loaded.

    Covers unreadable files, malformed YAML/JSON, and documents whose
    fields have the wrong shape (e.g. a string where a list is expected).
    """


class ValidationError(ClusterCapsError):
    """Raised when a declared capabilities spec is invalid for a registry.

    Covers references to baseline capability sets that the registry does
    not define.

    Attributes:
        name: The offending baseline capability set name.
    """

    def __init__(self, message: str, name: str = "") -> None:
        super().__init__(message)
        self.name = name
