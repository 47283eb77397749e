# urlspecs/errors.py


class UrlSpecsError(ValueError):
    """Base class for every error raised by urlspecs."""


class InvalidUrlError(UrlSpecsError):
    """Input is empty or cannot be parsed as an absolute URL, even with a default scheme."""


class InvalidHostError(UrlSpecsError):
    """A host handed to the domain decomposer is empty."""


class PredictionServiceError(UrlSpecsError):
    """The remote prediction service could not be reached or answered badly."""
