"""Exceptions raised while embedding Web UI assets."""


class EmbedError(Exception):
    """Base class for asset embedding failures"""


class BundleError(EmbedError):
    """The build output is missing, unreadable or holds an unusable entry"""


class HeaderError(EmbedError):
    """A header cannot represent the compressed payload"""


class NameCollisionError(EmbedError):
    """Two build outputs map to the same header file and C symbols"""
