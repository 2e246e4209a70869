"""
Structured logging for hostdns.

Provides a pre-configured logger that emits JSON-structured log records
with registration context (zone, record, operation) so boot logs can be
filtered in log aggregation tools.
"""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any

import boto3

_CONTEXT_FIELDS = ("request_id", "zone_id", "record_name", "operation")


class StructuredFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Attach any extras injected via HostDNSLogger.log_operation
        for key in _CONTEXT_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                log_entry[key] = val
        return json.dumps(log_entry)


class HostDNSLogger:
    """Convenience wrapper around :mod:`logging` for registration steps."""

    def __init__(self, name: str = "hostdns") -> None:
        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(StructuredFormatter())
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)
        self.request_id = uuid.uuid4().hex[:12]

    def log_operation(
        self,
        level: int,
        message: str,
        *,
        zone_id: str | None = None,
        record_name: str | None = None,
        operation: str | None = None,
        request_id: str | None = None,
    ) -> None:
        """Emit a structured log record with registration context.

        Args:
            level: Logging level (e.g. logging.INFO).
            message: Human-readable message.
            zone_id: Hosted zone the run is working on.
            record_name: FQDN of the record being published.
            operation: Step name (e.g. 'resolve_zone').
            request_id: Correlation ID; defaults to one per logger, so all
                lines of a single run share it.
        """
        extra = {
            "zone_id": zone_id,
            "record_name": record_name,
            "operation": operation,
            "request_id": request_id or self.request_id,
        }
        self.logger.log(level, message, extra=extra)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.ERROR, message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.DEBUG, message, **kwargs)

    def enable_debug(self) -> None:
        """Raise verbosity, including botocore's request/response logging."""
        self.logger.setLevel(logging.DEBUG)
        boto3.set_stream_logger("botocore", logging.DEBUG)


# Module-level singleton
hd_logger = HostDNSLogger()
