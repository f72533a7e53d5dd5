"""Validation and normalization of project and package names."""

import re

_TRAILING_SLASHES = re.compile(r"/+$")
_VALID_PACKAGE_NAME = re.compile(
    r"^(?:@[a-z0-9\-*~][a-z0-9\-*._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*$"
)
_WHITESPACE = re.compile(r"\s+")
_LEADING_DOT_OR_UNDERSCORE = re.compile(r"^[._]")
_INVALID_CHARS = re.compile(r"[^a-z0-9\-~]+")


def format_target_dir(raw: str | None) -> str | None:
    """Trim whitespace and strip trailing slashes from a directory argument."""
    if raw is None:
        return None
    return _TRAILING_SLASHES.sub("", raw.strip())


def is_valid_package_name(name: str) -> bool:
    """Return True if name is acceptable as a package.json name.

    An optional @scope/ prefix is allowed. Scope and name start with a
    lowercase letter, digit, hyphen or tilde (the scope may also start
    with an asterisk) and continue with those characters plus dot and
    underscore.
    """
    return _VALID_PACKAGE_NAME.match(name) is not None


def to_valid_package_name(name: str) -> str:
    """Derive a package name from a human-entered project name.

    The result is not guaranteed to pass is_valid_package_name, e.g. a
    name made only of punctuation reduces to "-".
    """
    candidate = name.strip().lower()
    candidate = _WHITESPACE.sub("-", candidate)
    candidate = _LEADING_DOT_OR_UNDERSCORE.sub("", candidate, count=1)
    return _INVALID_CHARS.sub("-", candidate)
