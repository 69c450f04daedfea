"""Path template translation into Swagger placeholders."""

import re

FORMAT_SUFFIX = "(.:format)"
FORMAT_PLACEHOLDER = "{format}"
VERSION_PLACEHOLDER = "{version}"

_NAMED_SEGMENT = re.compile(r":([a-zA-Z_]\w*)")


def translate_path(path_template: str, version: str | None = None, hide_format: bool = False) -> str:
    """Rewrite ``/users/:id(.:format)`` style templates as ``/users/{id}{format}``.

    The format suffix is dropped instead when ``hide_format`` is set, and
    ``{version}`` is substituted only when a version is given.
    """
    path = path_template.replace(FORMAT_SUFFIX, "" if hide_format else FORMAT_PLACEHOLDER)
    path = _NAMED_SEGMENT.sub(r"{\1}", path)
    return path.replace(VERSION_PLACEHOLDER, version) if version else path
