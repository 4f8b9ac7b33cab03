"""Exception types raised by the manifest pipeline."""


class PushManifestError(Exception):
    """Base class for every fatal push-manifest error."""


class InputResolutionError(PushManifestError):
    """A top-level input document could not be located or read."""


class ManifestWriteError(PushManifestError):
    """The manifest file could not be persisted."""
