"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from decision_engine.domain.models import Decision


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = "decision-engine", **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = "decision-engine") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_decision(request_id: str, decision: Decision, duration_ms: float) -> None:
    """Log structured decision outcome for analysis (personal code is left out)"""
    extra: Dict[str, Any] = {
        "request_id": request_id,
        "step": "decision_complete",
        "approval_outcome": "approved" if decision.is_approved else "rejected",
        "duration_ms": duration_ms,
    }
    if decision.is_approved:
        extra["loan_amount"] = decision.loan_amount
        extra["loan_period"] = decision.loan_period
    else:
        extra["error_kind"] = decision.error_kind.value
        extra["error_tier"] = decision.error_kind.tier.value

    logging.info("Decision completed", extra=extra)
