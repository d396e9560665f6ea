"""
Deep clone of JSON-like structures that keeps callables.

The clone is built by a JSON round trip, so containers and scalars are freshly
allocated and follow JSON semantics: tuples come back as lists and mapping keys
as strings. Callables cannot be serialized; they are re-attached afterwards by
reference, at any depth.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import json
import logging
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import class_name

log = logging.getLogger(__name__)


# Methods --------------------------------------------------------------------------------------------------------------

def clone(source: Any) -> Any:
    """
    Deep clone a structure of mappings, lists, scalars and callables.

    Args:
        source: Object to clone. Mappings, lists, tuples, str, int, float, bool
            and None are cloned; callables are shared with the source.

    Returns:
        The clone. Every container is a new object, every callable is the
        very same object as in the source. Tuples become lists and mapping
        keys become their JSON text; keys converting to the same text collide,
        so {1: "a", "1": "b"} clones to {"1": "b"}, while a callable under
        either key is re-attached last and wins.

    Raises:
        ValueError: If source contains a circular reference.
        TypeError: If source contains a value JSON cannot represent, or a mapping
            key that is not str, int, float, bool or None.

    Examples:
        >>> def f(): ...
        >>> source = {"a": 1, "f": f, "arr": [{"g": f}]}
        >>> target = clone(source)
        >>> target == source, target is source, target["arr"][0]["g"] is f
        (True, False, True)
    """
    if callable(source) and not _is_container(source):
        return source

    content = json.dumps(source, default=_encode_default, ensure_ascii=False)
    target = json.loads(content)
    _attach_callables(source, target)
    return target


# Private methods ------------------------------------------------------------------------------------------------------

def _attach_callables(source: Any, target: Any) -> None:
    """Walk source and target in lockstep, copying callable references into target."""
    if isinstance(source, abc.Mapping):
        pairs = ((_json_key(key), value) for key, value in source.items())
    elif isinstance(source, (list, tuple)):
        pairs = enumerate(source)
    else:
        return

    for key, value in pairs:
        if _is_container(value):
            _attach_callables(value, target[key])
        elif callable(value):
            log.debug("re-attach callable %s at key %r", class_name(value), key)
            target[key] = value


def _encode_default(obj: Any) -> Any:
    """JSON encoder hook: placeholder for callables, dict for non-dict mappings."""
    if isinstance(obj, abc.Mapping):
        return dict(obj)
    if callable(obj):
        return None
    raise TypeError(f"object of type <{class_name(obj)}> is not JSON serializable")


def _is_container(obj: Any) -> bool:
    return isinstance(obj, (abc.Mapping, list, tuple))


def _json_key(key: Any) -> str:
    """Convert a mapping key the way the JSON encoder does."""
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    raise TypeError(f"keys must be str, int, float, bool or None, not <{class_name(key)}>")
