"""
config.py — Application defaults
=================================
Loaded into Flask with `app.config.from_object(Config)`, then overridden
by any `TRAVERSAL_LAB_*` environment variable
(e.g. `TRAVERSAL_LAB_PORT=8080`, `TRAVERSAL_LAB_DEFAULT_GRAPH=grid`).
"""

import secrets


class Config:
    SECRET_KEY = secrets.token_hex(32)
    HOST = "0.0.0.0"
    PORT = 5000
    DEBUG = False
    LOG_LEVEL = "INFO"

    # graph every new session starts with: "random", "grid" or "empty"
    DEFAULT_GRAPH = "random"
    DEFAULT_GRAPH_SEED = None

    # in-process session store: least-recently-used cap and idle eviction (seconds)
    MAX_SESSIONS = 256
    SESSION_IDLE_TIMEOUT = 3600
