"""
Diagrams - State for the three illustrative widgets
===================================================
Error grid with parity checks, the looping stage pipeline, and the
preset-driven metric chart. All state is small and derived on demand.
"""

import random
from dataclasses import dataclass, field
from urllib.parse import urlencode

import lang


# ============================================================================
# Error grid
# ============================================================================

# Data point -> checks it touches
ADJACENCY: dict[int, tuple[int, ...]] = {
    0: (0, 1),
    1: (0, 2),
    2: (1, 3),
    3: (2, 3),
    4: (0, 1, 2, 3),  # Center point touches every check
}

DATA_POINTS = tuple(ADJACENCY)
CHECKS = (0, 1, 2, 3)


@dataclass(frozen=True)
class GridCheck:
    id: int
    kind: str  # "Z" or "X"
    x: str
    y: str


@dataclass(frozen=True)
class GridPoint:
    id: int
    x: str
    y: str


GRID_CHECKS = [
    GridCheck(id=0, kind="Z", x="50%", y="20%"),
    GridCheck(id=1, kind="X", x="20%", y="50%"),
    GridCheck(id=2, kind="X", x="80%", y="50%"),
    GridCheck(id=3, kind="Z", x="50%", y="80%"),
]

GRID_POINTS = [
    GridPoint(id=0, x="20%", y="20%"),
    GridPoint(id=1, x="80%", y="20%"),
    GridPoint(id=4, x="50%", y="50%"),
    GridPoint(id=2, x="20%", y="80%"),
    GridPoint(id=3, x="80%", y="80%"),
]


@dataclass(frozen=True)
class ErrorGridState:
    """Data points currently carrying an injected error, in toggle order."""
    errors: tuple[int, ...] = ()

    @classmethod
    def from_points(cls, points) -> "ErrorGridState":
        state = cls()
        for point in points:
            if point not in ADJACENCY:
                raise ValueError(f"Unknown data point: {point}")
            if point not in state.errors:
                state = cls(errors=state.errors + (point,))
        return state

    def toggle(self, point: int) -> "ErrorGridState":
        if point not in ADJACENCY:
            raise ValueError(f"Unknown data point: {point}")
        if point in self.errors:
            return ErrorGridState(errors=tuple(e for e in self.errors if e != point))
        return ErrorGridState(errors=self.errors + (point,))

    def has_error(self, point: int) -> bool:
        return point in self.errors

    def active_checks(self) -> list[int]:
        """Checks that see an odd number of errored data points."""
        active = []
        for check in CHECKS:
            count = sum(1 for point in self.errors if check in ADJACENCY[point])
            if count % 2 != 0:
                active.append(check)
        return active

    def violation_count(self) -> int:
        return len(self.active_checks())

    def caption(self) -> str:
        if not self.errors:
            return lang.get("grid_stable")
        return lang.get("grid_violations", count=self.violation_count())

    def toggle_query(self, point: int) -> str:
        """Query string that asks the server to toggle `point` on this state."""
        params = [("errors", e) for e in self.errors]
        params.append(("toggle", point))
        return urlencode(params)


# ============================================================================
# Stage pipeline
# ============================================================================

STAGE_COUNT = 4


def next_step(step: int) -> int:
    return (step + 1) % STAGE_COUNT


@dataclass
class StageFrame:
    """One frame of the looping input -> transformer -> correction animation."""
    step: int = 0
    input_pattern: list[bool] = field(default_factory=list)

    def __post_init__(self):
        if not 0 <= self.step < STAGE_COUNT:
            raise ValueError(f"Step out of range: {self.step}")
        if not self.input_pattern:
            self.input_pattern = [random.random() > 0.7 for _ in range(9)]

    @property
    def next_step(self) -> int:
        return next_step(self.step)

    @property
    def input_active(self) -> bool:
        return self.step == 0

    @property
    def transformer_active(self) -> bool:
        return self.step in (1, 2)

    @property
    def attention_active(self) -> bool:
        return self.step == 1

    @property
    def output_active(self) -> bool:
        return self.step == 3

    @property
    def first_arrow_lit(self) -> bool:
        return self.step >= 1

    @property
    def second_arrow_lit(self) -> bool:
        return self.step >= 3

    @property
    def output_symbol(self) -> str:
        return "X" if self.output_active else "?"

    def pips(self) -> list[bool]:
        return [self.step == s for s in range(STAGE_COUNT)]


# ============================================================================
# Metric chart
# ============================================================================

# Logical error rate (%) per code distance: (standard decoder, ours)
PRESETS: dict[int, tuple[float, float]] = {
    3: (3.5, 2.9),
    5: (3.6, 2.75),
    11: (0.0041, 0.0009),
}

DEFAULT_DISTANCE = 5
CHART_HEADROOM = 1.25


def format_rate(value: float) -> str:
    if value < 0.01:
        return f"{value:.4f}%"
    return f"{value:.2f}%"


@dataclass(frozen=True)
class MetricPreset:
    distance: int = DEFAULT_DISTANCE

    def __post_init__(self):
        if self.distance not in PRESETS:
            raise ValueError(f"Unknown distance: {self.distance}")

    @property
    def baseline(self) -> float:
        return PRESETS[self.distance][0]

    @property
    def alternative(self) -> float:
        return PRESETS[self.distance][1]

    @property
    def scale(self) -> float:
        return max(self.baseline, self.alternative) * CHART_HEADROOM

    def baseline_height(self) -> float:
        return self.baseline / self.scale * 100

    def alternative_height(self) -> float:
        # Keep a sliver visible even for tiny values
        return max(1.0, self.alternative / self.scale * 100)

    def baseline_label(self) -> str:
        return format_rate(self.baseline)

    def alternative_label(self) -> str:
        return format_rate(self.alternative)

    @staticmethod
    def choices() -> list[int]:
        return sorted(PRESETS)
