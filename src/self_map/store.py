"""
Holder for the current self map. Every load path swaps the whole data set, and only
after the new set has been fully validated.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .generator import SelfMapGenerator
from .models import SelfMapData
from .sample import DEFAULT_DATA
from .validation import LENIENT, load_document, loads_document

logger = logging.getLogger(__name__)


class SelfMapStore:
    """
    Keeps the active SelfMapData. A failed load leaves the previous data untouched.
    """

    def __init__(self, data: Optional[SelfMapData] = None, dangling_policy: str = LENIENT) -> None:
        self.dangling_policy = dangling_policy
        self._data = data if data is not None else DEFAULT_DATA

    @property
    def data(self) -> SelfMapData:
        return self._data

    def replace(self, data: SelfMapData) -> SelfMapData:
        self._data = data
        logger.info(
            "Loaded self map with %d entries and %d associations",
            len(data.entries),
            len(data.associations),
        )
        return data

    def load_sample(self) -> SelfMapData:
        return self.replace(DEFAULT_DATA)

    def load_file(self, path: Union[str, Path]) -> SelfMapData:
        return self.replace(load_document(path, dangling_policy=self.dangling_policy))

    def load_text(self, text: str) -> SelfMapData:
        return self.replace(loads_document(text, dangling_policy=self.dangling_policy))

    def generate(self, prompt: str, generator: SelfMapGenerator) -> SelfMapData:
        return self.replace(generator.generate(prompt))
