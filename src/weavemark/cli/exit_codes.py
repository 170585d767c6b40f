# topmark:header:start
#
#   project      : WeaveMark
#   file         : exit_codes.py
#   file_relpath : src/weavemark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the WeaveMark CLI.

WeaveMark aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the WeaveMark CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid text in the expected encoding.
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNSUPPORTED_FILE_TYPE: Unknown source language or markup profile.
            Mirrors BSD ``EX_UNAVAILABLE (69)``.
        IO_ERROR: I/O error reading or writing a stream. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions (read/write). Mirrors BSD
            ``EX_NOPERM (77)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_FILE_TYPE = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
