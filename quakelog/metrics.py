from collections import Counter
from typing import Dict


class Metrics:
    """
    Minimal counter sink, logged once a run is over.
    """

    def __init__(self) -> None:
        self._counter = Counter()

    def increment(self, key: str, value: int = 1) -> None:
        self._counter[key] += value

    def snapshot(self) -> Dict[str, int]:
        return dict(self._counter)
