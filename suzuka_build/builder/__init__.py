from .cargo import CargoBuilder
from .types import Builder, BuilderError, BuilderUnavailableError

__all__ = ["Builder", "CargoBuilder", "BuilderError", "BuilderUnavailableError"]
