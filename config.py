"""
config.py — Settings
=====================
Read once from the environment; loaded into Flask with
`app.config.from_object(Config)`.
"""

import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


class Config:
    HOST      = os.environ.get("ALGOTRACE_HOST", "0.0.0.0")
    PORT      = _env_int("ALGOTRACE_PORT", 5000)
    DEBUG     = _env_bool("ALGOTRACE_DEBUG", False)
    LOG_LEVEL = os.environ.get("ALGOTRACE_LOG_LEVEL", "INFO")

    # input ceilings (traces grow O(n²) for the quadratic sorts)
    MAX_ARRAY_LENGTH = _env_int("ALGOTRACE_MAX_ARRAY_LENGTH", 200)
    MAX_GRAPH_NODES  = _env_int("ALGOTRACE_MAX_GRAPH_NODES", 100)
    MAX_GRAPH_EDGES  = _env_int("ALGOTRACE_MAX_GRAPH_EDGES", 500)
