from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Callable, List, Optional

from app.timer import HighResTimer


class Phase(Enum):
    AWAITING_FIRST_KEY = "awaiting_first_key"
    TYPING = "typing"
    FINISHED = "finished"
    CANCELLED = "cancelled"


@dataclass
class RoundState:
    target_text: str
    timer: HighResTimer = field(default_factory=HighResTimer)
    typed: List[str] = field(default_factory=list)
    phase: Phase = Phase.AWAITING_FIRST_KEY
    elapsed: Optional[timedelta] = None

    @classmethod
    def fresh(cls, target_text: str, timer_factory: Callable[[], HighResTimer] = HighResTimer):
        return cls(target_text=target_text, timer=timer_factory())

    @property
    def is_over(self) -> bool:
        return self.phase in (Phase.FINISHED, Phase.CANCELLED)

    @property
    def typed_text(self) -> str:
        return "".join(self.typed)

    def start(self):
        if self.phase is Phase.AWAITING_FIRST_KEY:
            self.timer.start()
            self.phase = Phase.TYPING

    def push(self, ch: str):
        self.start()
        self.typed.append(ch)

    def pop(self) -> bool:
        if not self.typed:
            return False
        self.typed.pop()
        return True

    def stop(self) -> timedelta:
        if self.phase is Phase.TYPING:
            self.elapsed = self.timer.elapsed()
            self.phase = Phase.FINISHED
        return self.elapsed or timedelta(0)

    def cancel(self):
        self.phase = Phase.CANCELLED
