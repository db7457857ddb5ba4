"""Scratch org creation use case."""

from .dto import ScratchOrgCreateResponse
from .options import ScratchOrgCreateOptions
from .resolver import ConfigurationResolver
from .service import ScratchOrgCreateService

__all__ = [
    "ScratchOrgCreateOptions",
    "ScratchOrgCreateResponse",
    "ConfigurationResolver",
    "ScratchOrgCreateService",
]
