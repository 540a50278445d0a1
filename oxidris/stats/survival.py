"""Kaplan-Meier survival curves for time-to-event data with censoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import groupby
from operator import itemgetter
from typing import Iterable


@dataclass(frozen=True)
class KaplanMeierCurve:
    """Step survival function evaluated at the times where events occurred.

    The four lists run in parallel: for each event time, the survival
    probability just after it, the number of subjects at risk just before it
    and the number of events at it.
    """

    times: list[int] = field(default_factory=list)
    survival_prob: list[float] = field(default_factory=list)
    at_risk: list[int] = field(default_factory=list)
    events: list[int] = field(default_factory=list)

    @classmethod
    def from_data(cls, data: Iterable[tuple[int, bool]]) -> KaplanMeierCurve:
        """Estimate the curve from ``(time, is_censored)`` observations.

        A censored observation leaves the risk set without an event.
        Raises ``ValueError`` for a negative time.
        """
        observations = sorted(
            ((int(time), bool(censored)) for time, censored in data),
            key=itemgetter(0),
        )
        if observations and observations[0][0] < 0:
            raise ValueError(f"times must not be negative, got {observations[0][0]}")

        curve = cls()
        survival = 1.0
        remaining = len(observations)
        for time, group in groupby(observations, key=itemgetter(0)):
            members = list(group)
            event_count = sum(1 for _, censored in members if not censored)
            if event_count:
                survival *= 1.0 - event_count / remaining
                curve.times.append(time)
                curve.survival_prob.append(survival)
                curve.at_risk.append(remaining)
                curve.events.append(event_count)
            remaining -= len(members)
        return curve

    def median_survival(self) -> float | None:
        """Time at which survival first drops to 50% or below.

        Interpolates linearly between the surrounding event times. Returns
        ``None`` if survival never reaches 50%.
        """
        previous: tuple[int, float] | None = None
        for time, prob in zip(self.times, self.survival_prob):
            if prob <= 0.5:
                if previous is None:
                    return float(time)
                t0, s0 = previous
                return t0 + (0.5 - s0) / (prob - s0) * (time - t0)
            previous = (time, prob)
        return None

    def survival_at(self, time: int) -> float:
        """Survival probability at ``time``: 1.0 before the first event."""
        for event_time, prob in zip(reversed(self.times), reversed(self.survival_prob)):
            if event_time <= time:
                return prob
        return 1.0