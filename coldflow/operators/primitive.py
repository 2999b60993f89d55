"""
coldflow Operator Primitive - Building Derived Observables
==========================================================

Every operator has the same shape. Given an upstream Observable, it returns a
new Observable whose subscription procedure, when handed an external observer:

1. builds an internal observer that applies the operator's per-value policy
   to each upstream value and calls the external observer once for every
   value the policy yields
2. subscribes that internal observer to the upstream Observable

The policy is created afresh for every subscription, so an operator never
holds state shared between two subscriptions.

Policies return an iterable of the values to forward: ``(value,)`` to pass one
value on, ``()`` to drop it. Each forwarded value therefore traces back to
exactly one upstream emission.

Example:
    ```python
    @operator("add")
    def add(amount):
        def policy(value):
            return (value + amount,)
        return policy

    add(of(1, 2), 10).subscribe(print)  # 11, 12
    ```
"""

import functools
import logging
from typing import Any, Callable, Optional, Tuple

from coldflow.config import ErrorPolicy, get_config
from coldflow.exceptions import OperatorError
from coldflow.observable.core import Observable, as_observable
from coldflow.observable.types import Observer, Policy, PolicyFactory

logger = logging.getLogger(__name__)


def derive(source: Any, policy_factory: PolicyFactory, *, label: str) -> Observable[Any]:
    """
    Build an Observable that applies a per-value policy to ``source``.

    Args:
        source: Upstream Observable, Subscribable or subscription procedure
        policy_factory: Called once per subscription to create the policy
        label: Name shown in chain descriptions and error messages

    Returns:
        A new Observable; ``source`` is not modified
    """
    upstream = as_observable(source)

    def subscribe_derived(observer: Observer) -> Any:
        policy = policy_factory()

        def on_value(value: Any) -> None:
            try:
                results = tuple(policy(value))
            except OperatorError:
                raise
            except Exception as exc:
                _handle_policy_failure(label, value, exc)
                return

            # The external observer runs outside the try block so its own
            # failures propagate unchanged.
            for result in results:
                observer(result)

        return upstream.subscribe(on_value)

    return Observable(subscribe_derived, label=label, upstream=upstream)


def _handle_policy_failure(label: str, value: Any, error: Exception) -> None:
    if get_config().error_policy is ErrorPolicy.LOG:
        logger.error(
            f"Operator {label!r} failed while processing {value!r}, value dropped",
            exc_info=error,
        )
        return
    raise OperatorError(label, value) from error


def format_label(name: str, args: Tuple[Any, ...] = (), kwargs: Optional[dict] = None) -> str:
    """Render an operator application as ``name(arg, key=arg)``."""
    parts = [_format_argument(arg) for arg in args]
    parts.extend(f"{key}={_format_argument(arg)}" for key, arg in (kwargs or {}).items())
    if not parts:
        return name
    return f"{name}({', '.join(parts)})"


def _format_argument(arg: Any) -> str:
    if callable(arg):
        return getattr(arg, "__name__", type(arg).__name__)
    return repr(arg)


def operator(
    name: Optional[str] = None, *, validate: Optional[Callable[..., None]] = None
) -> Callable[[Callable[..., Policy]], Callable[..., Observable[Any]]]:
    """
    Turn a policy factory into a bare operator.

    The decorated function receives the operator's configuration arguments
    and returns a policy. The resulting operator has the signature
    ``op(source, *args, **kwargs) -> Observable`` and calls the decorated
    function once per subscription.

    Args:
        name: Label for the operator, defaults to the function name
        validate: Optional check run on the configuration arguments when the
            operator is applied, before any subscription happens
    """

    def decorator(factory: Callable[..., Policy]) -> Callable[..., Observable[Any]]:
        op_name = name or factory.__name__

        @functools.wraps(factory)
        def apply(source: Any, *args: Any, **kwargs: Any) -> Observable[Any]:
            if validate is not None:
                validate(*args, **kwargs)
            return derive(
                source,
                lambda: factory(*args, **kwargs),
                label=format_label(op_name, args, kwargs),
            )

        return apply

    return decorator
