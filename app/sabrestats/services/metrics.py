"""Process-local step counters with one structured log line per outcome."""
import logging
from collections import Counter
from typing import Optional

log = logging.getLogger("sabrestats.metrics")

STEPS = ("fetch", "store", "notify")


class PollMetrics:
    def __init__(self):
        self.counters: Counter = Counter()

    def record(self, step: str, player_id: str, ok: bool, error: Optional[BaseException] = None) -> None:
        outcome = "ok" if ok else "failed"
        self.counters[f"{step}_{outcome}"] += 1
        count = self.counters[f"{step}_{outcome}"]
        if ok:
            log.info("step=%s player=%s outcome=ok count=%d", step, player_id, count)
        else:
            log.error(
                "step=%s player=%s outcome=failed count=%d error=%s",
                step,
                player_id,
                count,
                error,
            )

    def count(self, step: str, ok: bool = True) -> int:
        return self.counters[f"{step}_{'ok' if ok else 'failed'}"]

    @property
    def notify_successes(self) -> int:
        return self.count("notify")

    def snapshot(self) -> dict:
        return {
            f"{step}_{outcome}": self.counters[f"{step}_{outcome}"]
            for step in STEPS
            for outcome in ("ok", "failed")
        }
