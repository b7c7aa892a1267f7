from dataclasses import dataclass
from typing import Optional

from .rng import PMRandom


@dataclass(frozen=True)
class TilerConfig:
    width: int = 16
    height: int = 16
    seed: Optional[int] = None

    def make_rng(self) -> PMRandom:
        if self.seed is None:
            return PMRandom.from_clock()
        return PMRandom(self.seed)


DEFAULTS = TilerConfig()
