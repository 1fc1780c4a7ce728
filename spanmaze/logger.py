"""Package logger: shared by every spanmaze module."""

from __future__ import annotations

import logging

logger = logging.getLogger("spanmaze")
