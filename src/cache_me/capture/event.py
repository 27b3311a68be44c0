from dataclasses import dataclass, field


@dataclass(frozen=True)
class Event:
    timestamp: int
    path: str


@dataclass(frozen=True)
class Session:
    """Timestamps of one path served by a single cache fill, ascending."""

    timestamps: tuple[int, ...]

    @property
    def start(self) -> int:
        return self.timestamps[0]

    def __len__(self) -> int:
        return len(self.timestamps)


@dataclass(frozen=True)
class RouteCount:
    route: str
    count: int


@dataclass(frozen=True)
class ReconstructedLine:
    timestamp: int
    path: str

    def format(self) -> str:
        return f"{self.timestamp} {self.path}"


@dataclass
class Aggregation:
    counts: dict[str, int] = field(default_factory=dict)
    sessions_by_path: dict[str, list[Session]] = field(default_factory=dict)


@dataclass
class CalculationResult:
    results: list[RouteCount]
    log: list[ReconstructedLine]
    sessions_by_path: dict[str, list[Session]] = field(default_factory=dict)
    skipped_lines: int = 0
