import posixpath

PATH_DELIMITER = ","
_TRAILING_SEPARATORS = ("/", "\\")


def clean_path(path: str) -> str:
    path = path.strip()
    for sep in _TRAILING_SEPARATORS:
        if path.endswith(sep) and len(path) > 1:
            path = path[: -len(sep)]
            break
    if not path:
        return path

    path = posixpath.normpath(path)
    if path.startswith("//"):
        path = "/" + path.lstrip("/")
    return path


def clean_paths(value: str | None, delimiter: str = PATH_DELIMITER) -> list[str]:
    """
    Split a delimited path list and clean every entry, keeping order and
    duplicates. A missing or blank list yields no paths.
    """
    if value is None or not value.strip():
        return []
    return [clean_path(part) for part in value.split(delimiter)]
