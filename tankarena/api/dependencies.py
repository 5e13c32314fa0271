"""FastAPI dependency injection: provides the MatchManager singleton."""

from __future__ import annotations

from tankarena.api.match_manager import MatchManager

_match_manager: MatchManager | None = None


def set_match_manager(manager: MatchManager | None) -> None:
    global _match_manager
    _match_manager = manager


def get_match_manager() -> MatchManager:
    if _match_manager is None:
        raise RuntimeError("MatchManager not initialized: server not started correctly.")
    return _match_manager
