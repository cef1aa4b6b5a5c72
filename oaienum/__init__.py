"""oaienum - OpenAPI schemas and codecs for enumerations."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("oaienum")
except PackageNotFoundError:
    __version__ = "(local)"
