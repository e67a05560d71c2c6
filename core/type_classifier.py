import mimetypes
import os

DEFAULT_MEDIA_TYPE = "application/octet-stream"

# Non-"text/*" types that are still safe to decode and return as text.
TEXTUAL_APPLICATION_TYPES = frozenset({
    "application/json",
    "application/javascript",
    "application/xml",
})

# Extensions missing from (or inconsistently mapped by) the built-in table.
SUPPLEMENTARY_TYPES = {
    ".md": "text/markdown",
    ".markdown": "text/markdown",
    ".yaml": "text/yaml",
    ".yml": "text/yaml",
    ".toml": "text/x-toml",
    ".ini": "text/plain",
    ".cfg": "text/plain",
    ".log": "text/plain",
    ".sh": "text/x-sh",
    ".csv": "text/csv",
    ".js": "application/javascript",
    ".mjs": "application/javascript",
    ".jsx": "text/jsx",
    ".ts": "text/x-typescript",
    ".tsx": "text/tsx",
    ".xml": "application/xml",
}

# Built-in defaults only: system mime.types files would make the result
# depend on the host.
_mime_table = mimetypes.MimeTypes(filenames=())
for _ext, _type in SUPPLEMENTARY_TYPES.items():
    _mime_table.add_type(_type, _ext, strict=True)


def media_type(path: str) -> str:
    """Return the media type for ``path`` based on its extension."""
    _, ext = os.path.splitext(path)
    if not ext:
        return DEFAULT_MEDIA_TYPE
    mime, _ = _mime_table.guess_type("file" + ext.lower(), strict=True)
    return mime or DEFAULT_MEDIA_TYPE


def is_textual_type(mime: str) -> bool:
    return mime.startswith("text/") or mime in TEXTUAL_APPLICATION_TYPES


def is_textual(path: str) -> bool:
    return is_textual_type(media_type(path))
