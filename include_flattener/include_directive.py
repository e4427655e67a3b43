"""Recognition of `#include "..."` lines."""

from dataclasses import dataclass

from include_flattener.errors import MalformedIncludeError

DEFAULT_PREFIX = '#include "'


@dataclass(frozen=True)
class IncludeDirective:
    """A well-formed include directive found in a scanned file."""

    name: str  # path relative to the including file's directory
    line: str


def parse_include_directive(
    line: str, prefix: str = DEFAULT_PREFIX
) -> IncludeDirective | None:
    """Parse a single line into an include directive.

    Returns None when the line does not start with ``prefix``. Raises
    MalformedIncludeError when it does but no closing quote follows.
    """
    if not line.startswith(prefix):
        return None
    start = len(prefix)
    end = line.find('"', start)
    if end == -1:
        raise MalformedIncludeError(line)
    return IncludeDirective(name=line[start:end], line=line)
