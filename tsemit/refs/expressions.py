"""
Factories for frequently generated runtime expressions.

Covers the ``console`` API, ``Promise`` combinators, ``fetch`` requests and
the ``Object`` static helpers. Every factory returns an ExpressionRef.
"""

from __future__ import annotations

from .expression_ref import ExpressionRef, _args
from .type_ref import TypeRef

_CONSOLE = ExpressionRef("console")
_FETCH = ExpressionRef("fetch")
_PROMISE = TypeRef("Promise")
_OBJECT = TypeRef("Object")


def _array_literal(items) -> str:
    return f"[{_args(items)}]"


def _json_request(method: str, body) -> str:
    return (
        f"{{ method: '{method}', body: JSON.stringify({body}), "
        f"headers: {{ 'Content-Type': 'application/json' }} }}"
    )


# =============================================================================
# console
# =============================================================================

def console_log(*args) -> ExpressionRef:
    return _CONSOLE.call("log", *args)


def console_error(*args) -> ExpressionRef:
    return _CONSOLE.call("error", *args)


def console_warn(*args) -> ExpressionRef:
    return _CONSOLE.call("warn", *args)


def console_info(*args) -> ExpressionRef:
    return _CONSOLE.call("info", *args)


def console_debug(*args) -> ExpressionRef:
    return _CONSOLE.call("debug", *args)


def console_table(data) -> ExpressionRef:
    return _CONSOLE.call("table", data)


def console_time(label) -> ExpressionRef:
    return _CONSOLE.call("time", label)


def console_time_end(label) -> ExpressionRef:
    return _CONSOLE.call("timeEnd", label)


# =============================================================================
# Promise
# =============================================================================

def promise_resolve(value) -> ExpressionRef:
    return _PROMISE.call("resolve", value)


def promise_reject(reason) -> ExpressionRef:
    return _PROMISE.call("reject", reason)


def promise_all(*promises) -> ExpressionRef:
    return _PROMISE.call("all", _array_literal(promises))


def promise_all_settled(*promises) -> ExpressionRef:
    return _PROMISE.call("allSettled", _array_literal(promises))


def promise_race(*promises) -> ExpressionRef:
    return _PROMISE.call("race", _array_literal(promises))


def promise_any(*promises) -> ExpressionRef:
    return _PROMISE.call("any", _array_literal(promises))


def promise_new(executor) -> ExpressionRef:
    """``new Promise(executor)``"""
    return _PROMISE.new(executor)


# =============================================================================
# fetch
# =============================================================================

def fetch_get(url) -> ExpressionRef:
    return _FETCH.invoke(url)


def fetch_post(url, body) -> ExpressionRef:
    """POST ``body`` as JSON."""
    return _FETCH.invoke(url, _json_request("POST", body))


def fetch_put(url, body) -> ExpressionRef:
    """PUT ``body`` as JSON."""
    return _FETCH.invoke(url, _json_request("PUT", body))


def fetch_delete(url) -> ExpressionRef:
    return _FETCH.invoke(url, "{ method: 'DELETE' }")


def response_json(response) -> ExpressionRef:
    return ExpressionRef.from_(response).call("json")


def response_text(response) -> ExpressionRef:
    return ExpressionRef.from_(response).call("text")


# =============================================================================
# Object
# =============================================================================

def object_keys(obj) -> ExpressionRef:
    return _OBJECT.call("keys", obj)


def object_values(obj) -> ExpressionRef:
    return _OBJECT.call("values", obj)


def object_entries(obj) -> ExpressionRef:
    return _OBJECT.call("entries", obj)


def object_assign(target, *sources) -> ExpressionRef:
    return _OBJECT.call("assign", target, *sources)


def object_freeze(obj) -> ExpressionRef:
    return _OBJECT.call("freeze", obj)


def object_spread(source) -> ExpressionRef:
    """Shallow copy literal ``{ ...source }``."""
    return ExpressionRef(f"{{ ...{source} }}")


def object_from_entries(entries) -> ExpressionRef:
    return _OBJECT.call("fromEntries", entries)
