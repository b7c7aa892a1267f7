import time
from dataclasses import dataclass, field
from typing import List, Protocol, Sequence

A = 16807
M = 0x7FFFFFFF  # 2^31-1


class RangeSource(Protocol):
    def randn(self, lo: int, hi: int) -> int:
        """Uniformly distributed integer in [lo, hi], both inclusive."""
        ...


class RandomExhausted(RuntimeError):
    pass


def pm_next(state: int) -> int:
    return (state * A) % M


def normalize_seed(seed: int) -> int:
    # State 0 is a fixed point of the multiplier, so it maps to 1.
    s = seed % M
    return s if s else 1


def _check_range(lo: int, hi: int) -> None:
    if lo > hi:
        raise ValueError(f"empty range [{lo}, {hi}]")


@dataclass
class PMRandom:
    """
    Park–Miller "minimal standard" engine (multiplier 16807, modulus 2^31-1).
    Raw outputs lie in 1..M-1; randn() rejects the uneven tail so every value
    of the requested range is equally likely.
    """
    state: int

    def __post_init__(self):
        self.state = normalize_seed(self.state)

    @classmethod
    def from_clock(cls) -> "PMRandom":
        return cls(time.perf_counter_ns())

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def randn(self, lo: int, hi: int) -> int:
        _check_range(lo, hi)
        span = hi - lo + 1
        if span > M - 1:
            raise ValueError(f"range [{lo}, {hi}] wider than the engine's {M - 1} outputs")
        limit = (M - 1) - ((M - 1) % span)
        while True:
            v = self.next32() - 1   # 0..M-2
            if v < limit:
                return lo + v % span


@dataclass
class ScriptedRandom:
    """Replays a fixed sequence of draws. Each value must fit the range asked for."""
    values: Sequence[int]
    pos: int = 0
    drawn: List[int] = field(default_factory=list)

    def randn(self, lo: int, hi: int) -> int:
        _check_range(lo, hi)
        if self.pos >= len(self.values):
            raise RandomExhausted(f"script of {len(self.values)} draws exhausted")
        v = self.values[self.pos]
        if not (lo <= v <= hi):
            raise ValueError(f"scripted draw #{self.pos} = {v} outside [{lo}, {hi}]")
        self.pos += 1
        self.drawn.append(v)
        return v

    @property
    def remaining(self) -> int:
        return len(self.values) - self.pos
