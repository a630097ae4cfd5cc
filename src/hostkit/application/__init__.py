from __future__ import annotations

from hostkit.application.config import TaskConfig

__all__ = ["TaskConfig"]
