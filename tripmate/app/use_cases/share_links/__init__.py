"""
Share Link Use Cases

Capability tokens granting access to a single trip.
"""

from .create_share_link_use_case import CreateShareLinkUseCase
from .resolve_share_link_use_case import ResolveShareLinkUseCase
from .get_share_link_use_case import GetShareLinkUseCase
from .dtos import ShareLinkResponse, ShareLinkInfoResponse

__all__ = [
    "CreateShareLinkUseCase",
    "ResolveShareLinkUseCase",
    "GetShareLinkUseCase",
    "ShareLinkResponse",
    "ShareLinkInfoResponse",
]
