"""Command-line argument parsing for find-style filters."""

from pydantic import ValidationError

from .models import FilterConfig, SizeComparison, SizeFilter


HELP_TEXT = """Usage:
\tpath [options] - find files by path with options.

\tOptions:
\t\t-inum inum - inode number;
\t\t-name name - file name;
\t\t-size [-=+]size - file's size (less, equal, more);
\t\t-nlinks num - file's hardlinks;
\t\t-exec path - file to execute;
"""

OPTIONS = ("-inum", "-name", "-size", "-nlinks", "-exec")


class ArgumentError(ValueError):
    """Base class for command-line usage errors."""

    reason = "Wrong usage"

    def __init__(self, detail: str | None = None):
        self.detail = detail
        message = self.reason if detail is None else f"{self.reason}: {detail}"
        super().__init__(message)


class MissingRootError(ArgumentError):
    reason = "Missing root path"


class UnknownOptionError(ArgumentError):
    reason = "Unknown option"


class IncompleteOptionError(ArgumentError):
    reason = "Incomplete option"


class SizeUsageError(ArgumentError):
    reason = 'Wrong usage of "size" option'


class NumericValueError(ArgumentError):
    reason = "Invalid numeric value"


def parse_unsigned(option: str, value: str) -> int:
    """Parse a non-negative decimal integer given for an option."""
    if not value.isdigit() or not value.isascii():
        raise NumericValueError(f"{option} {value!r}")
    return int(value)


def parse_size(value: str) -> SizeFilter:
    """Parse a ``-size`` value such as ``+100``, ``=0`` or ``-4096``."""
    if not value:
        raise SizeUsageError("missing sign")
    try:
        comparison = SizeComparison(value[0])
    except ValueError:
        raise SizeUsageError(f"invalid sign {value[0]!r}") from None
    return SizeFilter(comparison=comparison, size=parse_unsigned("-size", value[1:]))


def parse_arguments(args: list[str]) -> FilterConfig:
    """Convert a flat argument list into a FilterConfig.

    The first argument is the root path; the rest are (flag, value) pairs.
    Repeated flags overwrite earlier ones.

    Raises:
        ArgumentError: On a missing root, unknown flag, unpaired flag,
            malformed size or non-numeric value.
    """
    if not args:
        raise MissingRootError()

    fields: dict[str, object] = {"root": args[0]}
    options = args[1:]

    for i in range(0, len(options), 2):
        option = options[i]
        if i + 1 >= len(options):
            if option in OPTIONS:
                raise IncompleteOptionError(option)
            raise UnknownOptionError(option)
        value = options[i + 1]

        if option == "-inum":
            fields["inum"] = parse_unsigned(option, value)
        elif option == "-name":
            fields["name"] = value
        elif option == "-size":
            fields["size"] = parse_size(value)
        elif option == "-nlinks":
            fields["nlinks"] = parse_unsigned(option, value)
        elif option == "-exec":
            fields["exec_path"] = value
        else:
            raise UnknownOptionError(option)

    try:
        return FilterConfig(**fields)
    except ValidationError as e:
        raise ArgumentError(str(e)) from e

