from __future__ import annotations

import inspect
from typing import Any, Callable, Optional

from solid.core.models import OK


class ContractViolation(TypeError):
    """Raised when an implementation cannot stand in for its contract."""


def declares(*statuses: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Declare the result statuses an operation may return.

    Implementations that do not redeclare inherit the contract's declaration.
    """

    if not statuses:
        raise ValueError("declares() needs at least one status")

    def mark(fn: Callable[..., Any]) -> Callable[..., Any]:
        fn.__result_statuses__ = frozenset(statuses)  # type: ignore[attr-defined]
        return fn

    return mark


def declared_statuses(fn: Any) -> Optional[frozenset[str]]:
    return getattr(fn, "__result_statuses__", None)


def contract_operations(contract: type) -> list[str]:
    ops = sorted(getattr(contract, "__abstractmethods__", ()))
    if not ops:
        raise ValueError(f"{contract.__name__} declares no abstract operations")
    return ops


def _sample_call(sig: inspect.Signature) -> tuple[list[Any], dict[str, Any]]:
    """Build the widest argument set a caller of `sig` may legally pass."""

    args: list[Any] = []
    kwargs: dict[str, Any] = {}
    for p in sig.parameters.values():
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD):
            args.append(object())
        elif p.kind == p.KEYWORD_ONLY:
            kwargs[p.name] = object()
    return args, kwargs


def _check_signature(contract: type, impl_cls: type, name: str) -> None:
    expected = inspect.signature(getattr(contract, name))
    actual = inspect.signature(getattr(impl_cls, name))

    # bind() fails both when the implementation rejects an argument the contract
    # accepts and when it requires one the contract does not pass.
    args, kwargs = _sample_call(expected)
    try:
        actual.bind(*args, **kwargs)
    except TypeError as e:
        raise ContractViolation(
            f"{impl_cls.__name__}.{name}{actual} does not accept the arguments of "
            f"{contract.__name__}.{name}{expected}: {e}"
        ) from e

    expected_ret = _resolved_return(getattr(contract, name))
    actual_ret = _resolved_return(getattr(impl_cls, name))
    if (
        expected_ret is not inspect.Signature.empty
        and actual_ret is not inspect.Signature.empty
        and expected_ret != actual_ret
    ):
        raise ContractViolation(
            f"{impl_cls.__name__}.{name} returns {actual_ret!r}, "
            f"contract {contract.__name__}.{name} returns {expected_ret!r}"
        )


def _resolved_return(fn: Any) -> Any:
    """Return annotation with string (postponed) annotations evaluated.

    Annotations that cannot be evaluated count as undeclared.
    """

    try:
        return inspect.signature(fn, eval_str=True).return_annotation
    except Exception:
        return inspect.Signature.empty


def _check_statuses(contract: type, impl_cls: type, name: str) -> None:
    expected = declared_statuses(getattr(contract, name))
    if expected is None:
        return
    actual = declared_statuses(getattr(impl_cls, name)) or expected

    if OK in expected and OK not in actual:
        raise ContractViolation(
            f"{impl_cls.__name__}.{name} can never succeed (declares {sorted(actual)}); "
            f"{contract.__name__}.{name} allows {sorted(expected)}"
        )
    widened = actual - expected
    if widened:
        raise ContractViolation(
            f"{impl_cls.__name__}.{name} adds result variants {sorted(widened)} "
            f"not declared by {contract.__name__}.{name}"
        )


def check_conformance(contract: type, impl: Any) -> None:
    """Raise ContractViolation unless `impl` (instance or class) is substitutable for `contract`."""

    impl_cls = impl if isinstance(impl, type) else type(impl)
    if inspect.isabstract(impl_cls):
        missing = sorted(getattr(impl_cls, "__abstractmethods__", ()))
        raise ContractViolation(f"{impl_cls.__name__} is abstract; missing {missing}")

    for name in contract_operations(contract):
        op = getattr(impl_cls, name, None)
        if op is None or not callable(op):
            raise ContractViolation(f"{impl_cls.__name__} does not implement {contract.__name__}.{name}")
        _check_signature(contract, impl_cls, name)
        _check_statuses(contract, impl_cls, name)


def conforms(contract: type, impl: Any) -> bool:
    try:
        check_conformance(contract, impl)
    except ContractViolation:
        return False
    return True
