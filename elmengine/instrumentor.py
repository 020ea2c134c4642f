"""Scope profiling written out as a Chrome trace-event JSON file."""

from __future__ import annotations

import atexit
import threading
import time
from dataclasses import dataclass
from typing import TextIO

from elmengine.log import core_logger

_HEADER = '{"otherData": {},"traceEvents":[{}'
_FOOTER = "]}"
_CALLING_CONVENTION = "__cdecl "


@dataclass(frozen=True)
class ProfileResult:
    """One timed scope: start in microseconds, duration in whole microseconds."""

    name: str
    start_us: float
    elapsed_time_us: int
    thread_id: int


class Instrumentor:
    """Writes profile results of the current session to a trace file."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._session: str | None = None
        self._stream: TextIO | None = None

    def begin_session(self, name: str, fpath: str = "resuls.json") -> None:
        """Open a new session; an open one is closed first."""
        with self._lock:
            if self._session is not None:
                logger = core_logger()
                if logger is not None:
                    logger.error(
                        "Instrumentor::BeginSession('%s') when session \"%s\" already open",
                        name,
                        self._session,
                    )
                self._end_session_locked()

            try:
                self._stream = open(fpath, "w", encoding="utf-8")
            except OSError:
                self._stream = None
                logger = core_logger()
                if logger is not None:
                    logger.error('Instrumentor could not open results file "%s"', fpath)
                return

            self._session = name
            self._write(_HEADER)

    def end_session(self) -> None:
        """Close the current session, if any, finishing the JSON document."""
        with self._lock:
            self._end_session_locked()

    def write_profile(self, result: ProfileResult) -> None:
        """Append one trace event to the open session; ignored without one."""
        entry = (
            ",{"
            '"cat":"function",'
            f'"dur":{int(result.elapsed_time_us)},'
            f'"name":"{result.name}",'
            '"ph":"X",'
            '"pid":0,'
            f'"tid":{result.thread_id},'
            f'"ts":{result.start_us:.3f}'
            "}"
        )
        with self._lock:
            if self._session is not None:
                self._write(entry)

    def _write(self, text: str) -> None:
        assert self._stream is not None
        self._stream.write(text)
        self._stream.flush()

    def _end_session_locked(self) -> None:
        if self._session is None:
            return
        self._write(_FOOTER)
        assert self._stream is not None
        self._stream.close()
        self._stream = None
        self._session = None


_instance = Instrumentor()
atexit.register(_instance.end_session)


def get_instrumentor() -> Instrumentor:
    """The process-wide instrumentor."""
    return _instance


class InstrumentationTimer:
    """Times a scope and reports it to an instrumentor when stopped."""

    def __init__(self, name: str, instrumentor: Instrumentor | None = None) -> None:
        self._name = name
        self._instrumentor = instrumentor if instrumentor is not None else get_instrumentor()
        self._start_ns = time.perf_counter_ns()
        self._stopped = False

    def stop(self) -> None:
        end_ns = time.perf_counter_ns()
        start_us = self._start_ns / 1000.0
        elapsed_us = end_ns // 1000 - self._start_ns // 1000
        self._instrumentor.write_profile(
            ProfileResult(self._name, start_us, elapsed_us, threading.get_ident())
        )
        self._stopped = True

    def __enter__(self) -> InstrumentationTimer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._stopped:
            self.stop()


def cleanup_output_string(expr: str, remove: str) -> str:
    """Drop occurrences of ``remove`` and turn double quotes into single ones."""
    result: list[str] = []
    i = 0
    n = len(expr)
    while i < n:
        if remove and expr.startswith(remove, i):
            i += len(remove)
            if i >= n:
                break
        ch = expr[i]
        result.append("'" if ch == '"' else ch)
        i += 1
    return "".join(result)


def profile_scope(name: str, instrumentor: Instrumentor | None = None) -> InstrumentationTimer:
    """A timer for use in a ``with`` block, with a cleaned-up name."""
    return InstrumentationTimer(cleanup_output_string(name, _CALLING_CONVENTION), instrumentor)