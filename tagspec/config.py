"""
tagspec shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

# Keys read from os.environ when set there (CI runners, containers).
_ENVIRON_KEYS = (
    "TAGSPEC_TRACE",
    "TAGSPEC_TRACE_STYLE",
    "GITHUB_ACTIONS",
    "INPUT_TAGS",
)


def load_env():
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key in _ENVIRON_KEYS:
        if key in os.environ:
            env[key] = os.environ[key]
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(key, choices, default):
    """Return env value if it is one of *choices*, else *default*."""
    raw = (env.get(key) or "").strip().lower()
    return raw if raw in choices else default


def resolve_trace_style():
    """Pick the trace style: explicit setting, else actions when under CI."""
    style = _env_choice("TAGSPEC_TRACE_STYLE", {"actions", "plain", "auto"}, "auto")
    if style != "auto":
        return style
    return "actions" if _env_bool("GITHUB_ACTIONS") else "plain"


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.3.0"
CONTRACT_SCHEMA_VERSION = "1.0"

VALID_FORMATS = ("json", "table")

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env / environment)
# ---------------------------------------------------------------------------

env = load_env()

TRACE_ENABLED = _env_bool("TAGSPEC_TRACE", True)
TRACE_STYLE = resolve_trace_style()
INPUT_TAGS = env.get("INPUT_TAGS", "")

# Set by the CLI entry point.
RUNTIME_QUIET = False
