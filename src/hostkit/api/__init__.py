from __future__ import annotations

from hostkit.api.runner import BatchRunner, create_runner

__all__ = ["BatchRunner", "create_runner"]
