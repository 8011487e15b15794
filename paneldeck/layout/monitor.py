"""Timing helper for layout operations run inside UI event handlers."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator

from paneldeck.config import LAYOUT_RULES

from .models import OperationMetrics


log = logging.getLogger(__name__)


@contextmanager
def measure_operation(name: str, panel_count: int = 0) -> Iterator[OperationMetrics]:
    """Time the enclosed block.

    The yielded ``OperationMetrics`` is filled in when the block exits,
    including advisories for slow operations and large panel counts::

        with measure_operation("optimize", len(panels)) as m:
            optimize_layout(panels, options)
        print(m.operation_time_ms)
    """
    metrics = OperationMetrics(operation=name, panel_count=panel_count)
    start = time.perf_counter()
    try:
        yield metrics
    finally:
        metrics.operation_time_ms = (time.perf_counter() - start) * 1000
        if metrics.operation_time_ms > LAYOUT_RULES.slow_operation_ms:
            metrics.optimization_suggestions.append(
                f"Operation took longer than {LAYOUT_RULES.slow_operation_ms:g}ms "
                f"- consider optimization"
            )
        if panel_count > LAYOUT_RULES.large_panel_count:
            metrics.optimization_suggestions.append(
                "Large number of panels may impact performance"
            )
        log.debug("%s took %.2f ms over %d panel(s)", name, metrics.operation_time_ms, panel_count)
