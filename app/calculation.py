from dataclasses import dataclass
from datetime import timedelta

_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True)
class RoundResult:
    elapsed: timedelta
    matched: bool
    throughput: float = 0.0

    @property
    def elapsed_ms(self) -> int:
        return self.elapsed // _ONE_MS


def chars_per_second(chars: int, seconds: float) -> float:
    if seconds <= 0:
        return 0.0
    return chars / seconds


def score(typed: str, target: str, elapsed: timedelta) -> RoundResult:
    """
    Exact comparison, no trimming or case folding.
    Throughput is characters of the target per second and only set on a match.
    """
    matched = typed == target
    throughput = chars_per_second(len(target), elapsed.total_seconds()) if matched else 0.0
    return RoundResult(elapsed=elapsed, matched=matched, throughput=throughput)
