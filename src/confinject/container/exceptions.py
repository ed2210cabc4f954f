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
"""Container exceptions — fatal errors while wiring beans and configuration values."""

from __future__ import annotations

from confinject.kernel.exceptions import ConfinjectException


class BeanCreationException(ConfinjectException):
    """A bean or configuration value could not be created for an injection point."""

    def __init__(self, subject: str, reason: str) -> None:
        self.subject = subject
        self.reason = reason
        super().__init__(
            message=f"Failed to create '{subject}': {reason}",
            code="BEAN_CREATION",
            context={"subject": subject},
        )


class NoSuchBeanError(BeanCreationException):
    """No bean, and no configuration-value producer, exists for the requested type."""

    def __init__(
        self,
        *,
        bean_type: type | None = None,
        required_by: str | None = None,
        parameter: str | None = None,
        configuration_value: bool = False,
    ) -> None:
        self.bean_type = bean_type
        self.required_by = required_by
        self.parameter = parameter
        self.configuration_value = configuration_value

        type_desc = getattr(bean_type, "__name__", repr(bean_type)) if bean_type is not None else None
        if configuration_value:
            headline = f"No configuration value producer is registered for type '{type_desc}'"
        elif type_desc:
            headline = f"No bean of type '{type_desc}' is registered"
        else:
            headline = "No matching bean is registered"

        lines = [f"NoSuchBeanError: {headline}"]

        if required_by or parameter:
            lines.append("")
            if required_by:
                lines.append(f"  Required by: {required_by}")
            if parameter:
                lines.append(f"    Parameter: {parameter}")

        lines.append("")
        lines.append("  Suggestions:")
        if configuration_value:
            lines.append("    - Call Container.register_configurations() with a store that converts this type")
            lines.append("    - Add a converter for this type to the store's converters")
        else:
            lines.append("    - Register the class with Container.register()")
            lines.append("    - Give the parameter a default value if it is optional")

        BeanCreationException.__init__(self, subject=required_by or "container", reason=headline)
        self.args = ("\n".join(lines),)

    def __str__(self) -> str:
        return self.args[0] if self.args else ""


class BeanCurrentlyInCreationError(BeanCreationException):
    """Circular dependency detected during bean resolution.

    The ``chain`` attribute contains the dependency path in resolution order.
    """

    def __init__(self, *, chain: list[type], current: type) -> None:
        self.chain = chain
        self.current = current

        chain_names = [t.__name__ for t in chain]
        chain_names.append(current.__name__)
        headline = f"Circular dependency: {' -> '.join(chain_names)}"

        lines = [f"BeanCurrentlyInCreationError: {headline}"]
        lines.append("")
        lines.append("  Suggestion: Break the cycle by injecting a configuration value or a factory instead")

        BeanCreationException.__init__(self, subject=current.__name__, reason=headline)
        self.args = ("\n".join(lines),)

    def __str__(self) -> str:
        return self.args[0] if self.args else ""
