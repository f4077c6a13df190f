"""Per-file failures raised by the conversion pipeline."""


class PipelineError(Exception):
    """Base class for errors that abort processing of a single file."""


class DecodeError(PipelineError):
    """Input could not be read or decoded."""


class InvalidRegion(PipelineError):
    """A scored rectangle is empty or outside the image."""


class DegenerateImage(PipelineError):
    """Image dimensions do not allow a 16:9 crop."""


class EncodeError(PipelineError):
    """Output JPEG could not be encoded or written."""
