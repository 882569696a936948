"""Benchmark route translation."""

import time
import tracemalloc

from translated_routes.commands.models import ProfileReport
from translated_routes.i18n.translator import RouteTranslator
from translated_routes.logging import get_module_logger

logger = get_module_logger()

SAMPLE_KEYS = ("about", "contact", "blog/{slug}")


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def profile(translator: RouteTranslator, iterations: int = 100) -> ProfileReport:
    """Measure cold and warm translation time and per-locale memory.

    Clears the translator's caches before the cold start run, so the route
    sources are read again afterwards.

    Args:
        translator: Translator to benchmark.
        iterations: Rounds of warm-cache lookups (three keys per round).
    """
    iterations = max(int(iterations), 1)
    locales = translator.registry.codes()
    locale = translator.default_locale

    translator.clear_cache()
    start = time.perf_counter()
    translator.translate("about", locale)
    cold_start_ms = _elapsed_ms(start)

    translator.translate("about", locale)
    start = time.perf_counter()
    for _ in range(iterations):
        for key in SAMPLE_KEYS:
            translator.translate(key, locale)
    warm_cache_ms = _elapsed_ms(start) / (iterations * len(SAMPLE_KEYS))

    translator.clear_cache()
    tracemalloc.start()
    try:
        memory_before, _ = tracemalloc.get_traced_memory()
        for code in locales:
            translator.translate("about", code)
        memory_after, _ = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()

    report = ProfileReport(
        iterations=iterations,
        cold_start_ms=cold_start_ms,
        warm_cache_ms=warm_cache_ms,
        memory_before=memory_before,
        memory_after=memory_after,
        locale_count=len(locales),
    )
    logger.info(
        "profiled_route_translation",
        cold_start_ms=round(cold_start_ms, 3),
        warm_cache_ms=round(warm_cache_ms, 5),
        memory_used=report.memory_used,
    )
    return report
