"""Strategy passes; importing this package registers all of them."""

from importlib import import_module

_PASS_MODULES = [
    "custom",
    "manual",
    "simple",
    "smart",
]

# Each module calls ``register`` at import time.
for _mod in _PASS_MODULES:  # pragma: no cover - import side effects only
    import_module(f".{_mod}", __name__)

__all__ = list(_PASS_MODULES)
