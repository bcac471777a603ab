"""Generic call-builder turning a MethodSpec into a bound façade method."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from loguru import logger

from xbmcapi.methods.schema import UNSET, MethodSpec, Param
from xbmcapi.rpc.types import ErrorHandler, SuccessHandler
from xbmcapi.utils.exceptions import ClientNotInitializedError, MissingRequiredParameterError

if TYPE_CHECKING:
    from xbmcapi.client import XBMC


def _check_required(spec: MethodSpec, values: dict[str, Any]) -> None:
    for param in spec.required:
        if values.get(param.wire) is None:
            raise MissingRequiredParameterError(spec.method, param.name)


def build_params(spec: MethodSpec, args: tuple[Any, ...] = (), kwargs: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Map positional and keyword arguments onto wire keys.

    Only arguments the caller actually passed end up in the mapping; an
    explicit None is kept and sent as null. Required fields that are missing
    or None raise MissingRequiredParameterError.
    """
    fields = spec.params
    if len(args) > len(fields):
        raise TypeError(f"{spec.method} takes at most {len(fields)} positional arguments ({len(args)} given)")
    values: dict[str, Any] = {}
    for param, value in zip(fields, args):
        values[param.wire] = value
    for key, value in (kwargs or {}).items():
        param = spec.lookup(key)
        if param is None:
            raise TypeError(f"{spec.method} got an unexpected parameter {key!r}")
        if param.wire in values:
            raise TypeError(f"{spec.method} got multiple values for parameter {param.name!r}")
        values[param.wire] = value
    values = {key: value for key, value in values.items() if value is not UNSET}
    _check_required(spec, values)
    return values


def params_from_object(spec: MethodSpec, details: Mapping[str, Any]) -> dict[str, Any]:
    """Extract the recognized keys of a structured object (wire or Python names)."""
    values: dict[str, Any] = {}
    used: set[str] = set()
    for param in spec.params:
        for key in (param.wire, param.name):
            if key in details and details[key] is not UNSET:
                values[param.wire] = details[key]
                used.add(key)
                break
    ignored = sorted(set(details) - used)
    if ignored:
        logger.debug(f"{spec.method}: ignoring unknown keys {ignored}")
    _check_required(spec, values)
    return values


class BoundRemoteMethod:
    """A remote method bound to a namespace instance."""

    def __init__(self, namespace: Namespace, spec: MethodSpec, attr: str):
        self._namespace = namespace
        self.spec = spec
        self.__name__ = attr
        self.__doc__ = spec.doc or f"Call {spec.method}."

    def __call__(
        self,
        *args: Any,
        on_success: SuccessHandler | None = None,
        on_error: ErrorHandler | None = None,
        **kwargs: Any,
    ) -> asyncio.Future:
        params = build_params(self.spec, args, kwargs)
        return self._namespace._dispatch(self.spec.method, params, on_success, on_error)

    def by_object(
        self,
        details: Mapping[str, Any],
        on_success: SuccessHandler | None = None,
        on_error: ErrorHandler | None = None,
    ) -> asyncio.Future:
        params = params_from_object(self.spec, details)
        return self._namespace._dispatch(self.spec.method, params, on_success, on_error)

    def build(self, *args: Any, **kwargs: Any) -> dict[str, Any]:
        """Return the parameter mapping a call would send, without sending it."""
        return build_params(self.spec, args, kwargs)

    def __repr__(self) -> str:
        return f"<remote method {self.spec.method}>"


class RemoteMethod:
    """Descriptor declaring a remote method on a Namespace subclass."""

    def __init__(
        self,
        method: str,
        *,
        required: tuple[Param, ...] = (),
        optional: tuple[Param, ...] = (),
        doc: str = "",
    ):
        self.spec = MethodSpec(method, tuple(required), tuple(optional), doc)
        self.attr = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.attr = name

    def __get__(self, instance: Namespace | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return BoundRemoteMethod(instance, self.spec, self.attr)


class Namespace:
    """Group of remote methods sharing a JSON-RPC namespace."""

    name: ClassVar[str] = ""

    def __init__(self, client: XBMC | None):
        if client is None:
            raise ClientNotInitializedError(self.name or type(self).__name__)
        self.client = client

    @classmethod
    def methods(cls) -> dict[str, MethodSpec]:
        """Python attribute name -> spec, in declaration order."""
        out: dict[str, MethodSpec] = {}
        for klass in reversed(cls.__mro__):
            for attr, value in vars(klass).items():
                if isinstance(value, RemoteMethod):
                    out[attr] = value.spec
        return out

    def _dispatch(
        self,
        method: str,
        params: dict[str, Any],
        on_success: SuccessHandler | None,
        on_error: ErrorHandler | None,
    ) -> asyncio.Future:
        return self.client.send(method, params, on_success, on_error)
