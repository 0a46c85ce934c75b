"""
Diagnostic trace output (grouped, human-readable lines).

Everything goes to stderr so stdout carries only command output. Under
GitHub Actions groups become ``::group::`` workflow commands (the runner
reads them from stderr as well); elsewhere they are ``[TRACE]`` headers.
"""

import sys
from contextlib import contextmanager

from tagspec import config


def _enabled():
    return config.TRACE_ENABLED and not config.RUNTIME_QUIET


def _stream():
    return sys.stderr


def start_group(name):
    if not _enabled():
        return
    if config.TRACE_STYLE == "actions":
        print(f"::group::{name}", file=_stream())
    else:
        print(f"[TRACE] {name}", file=_stream())


def info(message):
    if not _enabled():
        return
    if config.TRACE_STYLE == "actions":
        print(message, file=_stream())
    else:
        print(f"  {message}", file=_stream())


def end_group():
    if not _enabled():
        return
    if config.TRACE_STYLE == "actions":
        print("::endgroup::", file=_stream())


@contextmanager
def group(name):
    """Wrap trace lines in a named group."""
    start_group(name)
    try:
        yield
    finally:
        end_group()
