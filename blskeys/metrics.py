"""Prometheus metrics for blskeys.

All metrics live on a dedicated registry so that embedding applications can
choose whether to expose them alongside their own.
"""

import logging

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    Info,
    generate_latest,
)

from . import __version__

logger = logging.getLogger(__name__)

REGISTRY = CollectorRegistry()

APP_INFO = Info(
    "blskeys_build_info",
    "Build information about blskeys",
    registry=REGISTRY,
)
APP_INFO.info({"version": __version__, "curve": "bls12_381"})

KEYS_GENERATED_TOTAL = Counter(
    "keys_generated_total",
    "Total number of secret keys generated",
    registry=REGISTRY,
)

KEY_GENERATION_DURATION_SECONDS = Histogram(
    "key_generation_duration_seconds",
    "Time spent sampling a secret key",
    buckets=(0.00001, 0.0001, 0.001, 0.01, 0.1, 1.0),
    registry=REGISTRY,
)

DECODE_ERRORS_TOTAL = Counter(
    "decode_errors_total",
    "Total number of rejected key encodings",
    ["format", "error_type"],
    registry=REGISTRY,
)

SECRET_KEYS_ZEROIZED_TOTAL = Counter(
    "secret_keys_zeroized_total",
    "Total number of secret keys whose storage was zeroed",
    registry=REGISTRY,
)


def get_metrics_text() -> str:
    """Render the registry in the Prometheus text exposition format."""
    return generate_latest(REGISTRY).decode("utf-8")
