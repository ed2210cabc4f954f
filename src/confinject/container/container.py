# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Lightweight DI container with type-hint based resolution and configuration injection."""

from __future__ import annotations

import functools
import inspect
import typing
from collections.abc import Callable
from typing import Any, TypeVar, cast

import structlog

from confinject.config.port import Configurations
from confinject.container.call_site import (
    describe_field,
    describe_parameter,
    find_marker,
    split_annotated,
)
from confinject.container.exceptions import BeanCurrentlyInCreationError, NoSuchBeanError
from confinject.container.markers import ConfigurationValue
from confinject.container.producer import ConfigurationValueProducer
from confinject.container.registry import Registration
from confinject.container.types import Scope
from confinject.resolution.descriptor import CallSiteDescriptor
from confinject.resolution.resolver import KeyResolver

T = TypeVar("T")

logger = structlog.get_logger("confinject.container")


class Container:
    """Dependency injection container.

    Supports constructor injection via type hints, singleton and transient
    scopes, circular dependency detection, and configuration injection for
    fields and parameters marked with ``ConfigurationValue``. Configuration
    values are produced by one producer per type the registered store can
    convert.
    """

    def __init__(self, resolver: KeyResolver | None = None) -> None:
        self._registrations: dict[type, Registration] = {}
        self._producers: dict[type, Callable[[CallSiteDescriptor], Any]] = {}
        self._resolver = resolver or KeyResolver()
        self._descriptors: dict[tuple[Any, ...], CallSiteDescriptor] = {}
        self._resolving: dict[type, None] = {}  # insertion-ordered, O(1) lookup

    def register(self, cls: type, scope: Scope = Scope.SINGLETON) -> None:
        """Register a class for injection."""
        self._registrations[cls] = Registration(impl_type=cls, scope=scope)

    def register_instance(self, cls: type[T], instance: T) -> None:
        """Register an already-built singleton."""
        self._registrations[cls] = Registration(impl_type=cls, instance=instance)

    def register_configurations(self, configurations: Configurations) -> None:
        """Install one configuration-value producer per type the store can convert."""
        producer = ConfigurationValueProducer(configurations, self._resolver)
        for target_type in configurations.converters:
            self._producers[target_type] = functools.partial(producer.produce, target_type=target_type)
            logger.info("configuration_producer_registered", type=getattr(target_type, "__name__", repr(target_type)))

    def has_producer(self, target_type: type) -> bool:
        return target_type in self._producers

    def resolve(self, cls: type[T]) -> T:
        """Resolve an instance of the given type."""
        if cls not in self._registrations:
            raise NoSuchBeanError(bean_type=cls)
        return cast(T, self._resolve_registration(self._registrations[cls]))

    def call(self, func: Callable[..., T], **overrides: Any) -> T:
        """Invoke *func*, injecting configuration values and beans for its parameters."""
        kwargs = self._resolve_arguments(func, owner=None, overrides=overrides)
        return func(**kwargs)

    def _resolve_registration(self, reg: Registration) -> Any:
        if reg.scope == Scope.SINGLETON and reg.instance is not None:
            return reg.instance

        instance = self._create_instance(reg)

        if reg.scope == Scope.SINGLETON:
            reg.instance = instance

        return instance

    def _create_instance(self, reg: Registration) -> Any:
        """Create an instance, resolving constructor and field dependencies."""
        if reg.impl_type in self._resolving:
            raise BeanCurrentlyInCreationError(chain=list(self._resolving), current=reg.impl_type)
        self._resolving[reg.impl_type] = None
        try:
            init = reg.impl_type.__init__  # type: ignore[misc]
            if init is object.__init__:
                instance = reg.impl_type()
            else:
                instance = reg.impl_type(**self._resolve_arguments(init, owner=reg.impl_type, overrides={}))

            self._inject_configuration_fields(instance)
            return instance
        finally:
            self._resolving.pop(reg.impl_type, None)

    def _resolve_arguments(
        self,
        func: Callable[..., Any],
        owner: type | None,
        overrides: dict[str, Any],
    ) -> dict[str, Any]:
        hints = typing.get_type_hints(func, include_extras=True)
        hints.pop("return", None)
        sig = inspect.signature(func)
        required_by = f"{getattr(func, '__qualname__', repr(func))}()"

        params = [p for p in sig.parameters.values() if p.name != "self"]

        kwargs: dict[str, Any] = dict(overrides)
        for position, param in enumerate(params):
            param_name = param.name
            if param_name in kwargs or param_name not in hints:
                continue
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue

            hint = hints[param_name]
            base_type, metadata = split_annotated(hint)
            marker = find_marker(metadata)
            if marker is not None:
                kwargs[param_name] = self._produce(
                    base_type,
                    site=self._parameter_site(func, owner, param_name),
                    build=functools.partial(describe_parameter, func, param_name, position, hint, marker, owner),
                    required_by=required_by,
                    parameter=param_name,
                )
                continue

            has_default = param.default is not inspect.Parameter.empty
            if base_type in self._registrations:
                kwargs[param_name] = self.resolve(base_type)
            elif not has_default:
                raise NoSuchBeanError(
                    bean_type=base_type if isinstance(base_type, type) else None,
                    required_by=required_by,
                    parameter=f"{param_name}: {getattr(base_type, '__name__', repr(base_type))}",
                )
        return kwargs

    @staticmethod
    def _parameter_site(func: Callable[..., Any], owner: type | None, param_name: str) -> tuple[Any, ...] | None:
        """Cache key for a parameter descriptor, or ``None`` when it must not be cached.

        Inherited constructors are shared between classes, so the owner is part
        of the key. Bound methods share their underlying function. Functions
        defined inside another function are rebuilt on every call and are never
        cached.
        """
        func = getattr(func, "__func__", func)
        if owner is None and "<locals>" in getattr(func, "__qualname__", "<locals>"):
            return None
        return (owner, func, param_name)

    def _inject_configuration_fields(self, instance: Any) -> None:
        """Inject configuration values into fields marked with ConfigurationValue."""
        cls = type(instance)
        hints = typing.get_type_hints(cls, include_extras=True)

        for attr_name, hint in hints.items():
            base_type, metadata = split_annotated(hint)
            default = getattr(cls, attr_name, None)
            marker = default if isinstance(default, ConfigurationValue) else find_marker(metadata)
            if marker is None:
                continue

            value = self._produce(
                base_type,
                site=(cls, attr_name),
                build=functools.partial(describe_field, cls, attr_name, hint, marker),
                required_by=f"{cls.__qualname__}.{attr_name}",
                parameter=f"{attr_name}: {getattr(base_type, '__name__', repr(base_type))} = {marker!r}",
            )
            setattr(instance, attr_name, value)

    def _produce(
        self,
        target_type: Any,
        *,
        site: tuple[Any, ...] | None,
        build: Callable[[], CallSiteDescriptor],
        required_by: str,
        parameter: str,
    ) -> Any:
        produce = self._producers.get(target_type)
        if produce is None:
            raise NoSuchBeanError(
                bean_type=target_type if isinstance(target_type, type) else None,
                required_by=required_by,
                parameter=parameter,
                configuration_value=True,
            )

        if site is None:
            return produce(build())
        descriptor = self._descriptors.get(site)
        if descriptor is None:
            descriptor = self._descriptors.setdefault(site, build())
        return produce(descriptor)
