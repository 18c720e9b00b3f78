# src/difftok/errors.py


class DifftokError(Exception):
    """Base class for errors that end a run with exit status 1."""


class ArgumentError(DifftokError):
    """Malformed or unknown flags, or an invalid flag combination."""


class EncodingError(DifftokError):
    """Unknown or unloadable tokenizer name."""


class InputError(DifftokError):
    """Standard input could not be read."""


class SubprocessError(DifftokError):
    """git could not be started or exited with a nonzero status."""
