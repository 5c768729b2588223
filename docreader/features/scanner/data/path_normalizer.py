FILE_SCHEME = "file://"
LOCALHOST_PREFIX = "localhost/"


def _looks_like_windows_drive(value: str) -> bool:
    # "C:..." after the root slash has been removed
    return len(value) >= 2 and value[0].isascii() and value[0].isalpha() and value[1] == ":"


def normalize_file_url(raw: str) -> str:
    """
    Converts a file:// URI into a plain filesystem path.

    Anything else is returned unchanged. No percent-decoding is done:
        file:///home/a%20b   -> /home/a%20b
        file:///C:/x         -> C:/x
        file://localhost/C:/x -> C:/x
    """
    if not raw.startswith(FILE_SCHEME):
        return raw

    without_scheme = raw[len(FILE_SCHEME):]
    if without_scheme.startswith(LOCALHOST_PREFIX):
        without_scheme = without_scheme[len(LOCALHOST_PREFIX):]

    if without_scheme.startswith("/") and _looks_like_windows_drive(without_scheme[1:]):
        return without_scheme[1:]

    return without_scheme
