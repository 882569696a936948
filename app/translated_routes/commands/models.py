"""Result types returned by the operator commands."""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class RouteInfo:
    """One route from the host routing table.

    Attributes:
        uri: Path without surrounding slashes ("blog/{slug}"); "/" for root.
        name: Route name, if any.
        methods: HTTP methods served by the route.
    """

    uri: str
    name: str = ""
    methods: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TranslatedRouteRow:
    method: str
    uri: str
    name: str
    locale: str


@dataclass
class ValidationReport:
    """Outcome of checking route sources for consistency.

    ``missing``, ``extra`` and ``missing_from_locale`` are errors;
    ``unused`` is informational only, because routes may be registered
    dynamically.
    """

    base_locale: str = ""
    missing: Dict[str, List[str]] = field(default_factory=dict)
    extra: Dict[str, List[str]] = field(default_factory=dict)
    missing_from_locale: Dict[str, List[str]] = field(default_factory=dict)
    unused: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not (self.missing or self.extra or self.missing_from_locale)


@dataclass
class ProfileReport:
    """Translation timings and memory footprint."""

    iterations: int
    cold_start_ms: float
    warm_cache_ms: float
    memory_before: int
    memory_after: int
    locale_count: int

    @property
    def memory_used(self) -> int:
        return max(self.memory_after - self.memory_before, 0)

    @property
    def memory_per_locale(self) -> float:
        if not self.locale_count:
            return 0.0
        return self.memory_used / self.locale_count

    @property
    def speedup(self) -> float:
        if self.warm_cache_ms <= 0:
            return 0.0
        return self.cold_start_ms / self.warm_cache_ms

    def recommendations(self) -> List[Tuple[bool, str]]:
        """(ok, message) pairs for cold start, warm cache and memory."""
        return [
            (
                self.cold_start_ms <= 5,
                "Cold start performance is good."
                if self.cold_start_ms <= 5
                else "Cold start time is high. Consider enabling the route cache.",
            ),
            (
                self.warm_cache_ms <= 0.1,
                "Warm cache performance is excellent."
                if self.warm_cache_ms <= 0.1
                else "Warm cache time could be better. Check cache configuration.",
            ),
            (
                self.memory_used <= 1024 * 1024,
                "Memory usage is optimal."
                if self.memory_used <= 1024 * 1024
                else "Memory usage is high. Consider trimming route files.",
            ),
        ]
