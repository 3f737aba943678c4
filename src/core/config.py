"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PollingConfig:
    """Update polling settings for the consumer loop."""

    batch_size: int
    poll_interval: float
