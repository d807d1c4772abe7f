"""Domain ports (Protocols) for extension points."""

from prettiest.domain.ports.reporter import ReporterProtocol
from prettiest.domain.ports.visitor import VisitorProtocol

__all__ = [
    "ReporterProtocol",
    "VisitorProtocol",
]
