"""Adapters from third-party validators to result trees."""

from __future__ import annotations

from jsonexplain.adapters.jsonschema_tree import build_result_tree, explain

__all__ = ["build_result_tree", "explain"]
