r"""Backoff strategies computing retry delays from delay expressions."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ExpressionBackoff"]

from tierdelay.backoff.base import BaseBackoffStrategy
from tierdelay.backoff.expression import ExpressionBackoff
