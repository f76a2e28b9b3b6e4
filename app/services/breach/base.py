from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


class BreachServiceUnavailable(RuntimeError):
    """The remote breach corpus could not be consulted."""


@dataclass(frozen=True)
class RangeRecord:
    suffix: str
    count: int


class BreachProvider(ABC):

    @abstractmethod
    def fetch_range(self, prefix: str) -> List[RangeRecord]:
        """
        Returns every known hash suffix sharing the 5-character SHA-1 prefix.

        Only the prefix ever leaves the process (k-anonymity).
        Raises BreachServiceUnavailable when the corpus cannot be reached.
        """
        pass
