"""Directory prefix derivation and extension filtering for object keys."""

DELIMITER = "/"


def derive_directory_prefixes(key: str) -> list[str]:
    """Return every ancestor directory of an object key, shortest first.

    ``a/b/c/file.txt`` gives ``["a", "a/b", "a/b/c"]``. The key itself is
    never included, and a key without a delimiter has no directories.
    """
    segments = key.split(DELIMITER)
    prefixes = []
    for length in range(1, len(segments)):
        prefix = DELIMITER.join(segments[:length])
        if prefix:
            prefixes.append(prefix)
    return prefixes


def file_name(key: str) -> str:
    return key.rsplit(DELIMITER, 1)[-1]


def file_extension(key: str) -> str:
    """Text after the last '.' of the final key segment, or '' if none."""
    name = file_name(key)
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


def is_directory_marker(key: str) -> bool:
    """Zero-byte ``folder/`` objects created by consoles and sync tools."""
    return key.endswith(DELIMITER)


def is_excluded(key: str, exclusions: frozenset[str]) -> bool:
    extension = file_extension(key)
    return bool(extension) and extension in exclusions


def parse_extension_list(text: str) -> frozenset[str]:
    """Parse a comma-separated extension list such as ``"tmp, .log,bak"``.

    Whitespace and a leading dot are stripped; case is preserved.
    """
    extensions = set()
    for item in text.split(","):
        extension = item.strip().lstrip(".")
        if extension:
            extensions.add(extension)
    return frozenset(extensions)
