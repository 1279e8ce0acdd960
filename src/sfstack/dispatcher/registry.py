"""Process-wide table of tasks addressed by identifier and alias."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from sfstack.dispatcher.models import TaskRegistryError, TaskSpec, UnknownTaskError

_SEGMENT_RE = re.compile(r"^[a-z0-9][a-z0-9._-]*$")


class TaskRegistry:
    """Maps ``namespace:name`` and every alias to a TaskSpec.

    Built once at startup, then frozen. Lookups never mutate it.
    """

    def __init__(self, specs: Iterable[TaskSpec] = ()) -> None:
        self._by_identifier: dict[str, TaskSpec] = {}
        self._specs: list[TaskSpec] = []
        self._frozen = False
        for spec in specs:
            self.register(spec)

    def register(self, spec: TaskSpec) -> None:
        if self._frozen:
            raise TaskRegistryError(f"Registry is frozen; cannot register {spec.identifier!r}.")
        for segment in (spec.namespace, spec.name):
            if not _SEGMENT_RE.match(segment):
                raise TaskRegistryError(f"Invalid task namespace or name: {segment!r}")
        for identifier in spec.identifiers:
            if not identifier or identifier.strip() != identifier:
                raise TaskRegistryError(f"Invalid task alias: {identifier!r}")
            taken = self._by_identifier.get(identifier)
            if taken is not None:
                raise TaskRegistryError(
                    f"Identifier {identifier!r} of {spec.identifier!r} "
                    f"is already registered by {taken.identifier!r}.",
                )
        if len(set(spec.identifiers)) != len(spec.identifiers):
            raise TaskRegistryError(f"Task {spec.identifier!r} repeats one of its aliases.")
        for identifier in spec.identifiers:
            self._by_identifier[identifier] = spec
        self._specs.append(spec)

    def freeze(self) -> TaskRegistry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def table(self) -> Mapping[str, TaskSpec]:
        """Read-only view of identifier/alias -> spec."""

        return MappingProxyType(self._by_identifier)

    def get(self, identifier: str) -> TaskSpec:
        try:
            return self._by_identifier[identifier]
        except KeyError as error:
            raise UnknownTaskError(identifier) from error

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_identifier

    def __iter__(self) -> Iterator[TaskSpec]:
        """Iterate specs in registration order, once each."""

        return iter(tuple(self._specs))

    def __len__(self) -> int:
        return len(self._specs)
