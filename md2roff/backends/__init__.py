from ..options import Dialect
from .base import Backend, FontSet
from .man import ManBackend
from .mdoc import MdocBackend
from .mm import MmBackend
from .mom import MomBackend
from .ms import MsBackend

BACKENDS = {
    Dialect.MAN: ManBackend,
    Dialect.MDOC: MdocBackend,
    Dialect.MM: MmBackend,
    Dialect.MOM: MomBackend,
    Dialect.MS: MsBackend,
}


def get_backend(dialect: Dialect) -> Backend:
    """Return a backend instance for a dialect."""
    return BACKENDS[Dialect(dialect)]()


__all__ = [
    "Backend",
    "FontSet",
    "ManBackend",
    "MdocBackend",
    "MmBackend",
    "MomBackend",
    "MsBackend",
    "BACKENDS",
    "get_backend",
]
