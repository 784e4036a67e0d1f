"""
Monitoring for the Fake Store MCP server
- Prometheus metrics for tool calls and upstream requests
- Structured logging
"""

import time
import logging
from typing import Dict, Optional
from contextlib import asynccontextmanager

from prometheus_client import Counter, Histogram, start_http_server
from prometheus_client.core import CollectorRegistry
import structlog

from fakestore_mcp.config import settings

_renderer = (
    structlog.processors.JSONRenderer()
    if settings.LOG_FORMAT.lower() == "json"
    else structlog.dev.ConsoleRenderer(colors=False)
)

# Configure structured logging on top of the stdlib handlers (stderr)
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _renderer
    ],
    context_class=dict,
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)


def configure_logging(level: Optional[str] = None):
    """Send stdlib (and therefore structlog) output to stderr.

    stdout is reserved for the MCP stdio transport.
    """
    logging.basicConfig(
        level=getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]  # This defaults to stderr
    )


class MonitoringService:
    """Tool and upstream request metrics"""

    def __init__(self, service_name: str = settings.APP_NAME):
        self.service_name = service_name
        self.registry = CollectorRegistry()
        self.metrics = {}
        self.logger = structlog.get_logger(__name__).bind(service=service_name)
        self._initialize_metrics()

    def _initialize_metrics(self):
        self.metrics["tool_calls"] = Counter(
            "tool_calls_total",
            "MCP tool invocations",
            ["tool_name", "status"],
            registry=self.registry
        )

        self.metrics["tool_execution_duration"] = Histogram(
            "tool_execution_duration_seconds",
            "MCP tool execution duration",
            ["tool_name"],
            buckets=(0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
            registry=self.registry
        )

        self.metrics["upstream_requests"] = Counter(
            "upstream_requests_total",
            "Requests sent to the Fake Store API",
            ["method", "status"],
            registry=self.registry
        )

        self.metrics["errors_total"] = Counter(
            "errors_total",
            "Total number of errors",
            ["error_type", "component"],
            registry=self.registry
        )

    def record_metric(self, metric_name: str, value: float, labels: Dict[str, str]):
        metric = self.metrics.get(metric_name)
        if metric is None:
            self.logger.warning("Unknown metric", metric=metric_name)
            return

        if isinstance(metric, Counter):
            metric.labels(**labels).inc(value)
        else:
            metric.labels(**labels).observe(value)

    def record_upstream_request(self, method: str, status: str):
        """Count one upstream request; status is the HTTP code or an error name"""
        self.record_metric("upstream_requests", 1, {"method": method, "status": status})

    def record_error(self, error: BaseException, component: str):
        self.record_metric("errors_total", 1, {
            "error_type": type(error).__name__,
            "component": component
        })

    @asynccontextmanager
    async def track_tool_execution(self, tool_name: str):
        """Track MCP tool execution"""
        start_time = time.perf_counter()
        try:
            yield
        except Exception as e:
            duration = time.perf_counter() - start_time
            self.record_metric("tool_calls", 1, {"tool_name": tool_name, "status": "error"})
            self.record_metric("tool_execution_duration", duration, {"tool_name": tool_name})
            self.record_error(e, f"tool_{tool_name}")
            self.logger.info("Tool failed", tool=tool_name, duration=round(duration, 4), error=str(e))
            raise
        else:
            duration = time.perf_counter() - start_time
            self.record_metric("tool_calls", 1, {"tool_name": tool_name, "status": "success"})
            self.record_metric("tool_execution_duration", duration, {"tool_name": tool_name})
            self.logger.debug("Tool completed", tool=tool_name, duration=round(duration, 4))

    def sample_value(self, name: str, labels: Dict[str, str]) -> Optional[float]:
        """Current value of one exported sample, e.g. ``tool_calls_total``"""
        return self.registry.get_sample_value(name, labels)

    def start_exporter(self, port: int = settings.METRICS_PORT):
        """Serve /metrics over HTTP in a background thread"""
        start_http_server(port, registry=self.registry)
        self.logger.info("Metrics exporter started", port=port)
