"""Process-wide singleton registry, reset between tests."""

from __future__ import annotations

from collections.abc import Callable

_reset_fns: dict[str, Callable[[], None]] = {}


def register_singleton(name: str, reset_fn: Callable[[], None]) -> None:
    """Register *reset_fn* under *name*.

    Registering the same name again replaces the previous function, so a
    reloaded module does not leave a stale reset hook behind.
    """
    _reset_fns[name] = reset_fn


def registered_singletons() -> list[str]:
    return sorted(_reset_fns)


def reset_all_singletons() -> None:
    """Reset every registered singleton -- intended for test isolation."""
    for fn in list(_reset_fns.values()):
        fn()
