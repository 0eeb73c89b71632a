from abc import ABC, abstractmethod

from nextgen.models import JobRecord


class CatalogError(RuntimeError):
    """The job catalog could not be read."""


class JobCatalogBase(ABC):
    @abstractmethod
    def load(self) -> list[JobRecord]:
        pass
