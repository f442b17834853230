"""Interpret generated registration statements against a container model.

The model mirrors the resolution rules of ``IServiceCollection`` as far as the
tests need them: the last descriptor registered for a service wins, singletons
are cached per provider, scoped services per scope, and forwarding factories
resolve the implementation type through the provider.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_DIRECT = re.compile(r"^\w+\.Add(?P<lifetime>\w+)<(?P<service>[^,<>]+)>\(\);$")
_MERGED = re.compile(
    r"^\w+\.Add(?P<lifetime>\w+)<(?P<service>[^,<>]+), (?P<impl>[^,<>]+)>\(\);$",
)
_FORWARD = re.compile(
    r"^\w+\.Add(?P<lifetime>\w+)<(?P<service>[^,<>]+)>"
    r"\(static p => p\.GetRequiredService<(?P<impl>[^,<>]+)>\(\)\);$",
)


@dataclass(frozen=True)
class Descriptor:
    service: str
    lifetime: str
    implementation: str | None = None
    forward_to: str | None = None


@dataclass(eq=False)
class Instance:
    type_name: str


@dataclass
class ServiceProviderModel:
    descriptors: dict[str, list[Descriptor]]
    singletons: dict[int, Instance] = field(default_factory=dict, init=False)

    def create_scope(self) -> ScopeModel:
        return ScopeModel(provider=self)

    def get_services(self, service: str) -> list[Descriptor]:
        return self.descriptors.get(service, [])


@dataclass
class ScopeModel:
    provider: ServiceProviderModel
    scoped: dict[int, Instance] = field(default_factory=dict, init=False)

    def resolve(self, service: str) -> Instance:
        descriptors = self.provider.get_services(service)
        if not descriptors:
            msg = f"No service for type {service}."
            raise LookupError(msg)
        return self._activate(descriptors[-1])

    def _activate(self, descriptor: Descriptor) -> Instance:
        cache: dict[int, Instance] | None = None
        if descriptor.lifetime == "Singleton":
            cache = self.provider.singletons
        elif descriptor.lifetime == "Scoped":
            cache = self.scoped

        key = id(descriptor)
        if cache is not None and key in cache:
            return cache[key]

        if descriptor.forward_to is not None:
            instance = self.resolve(descriptor.forward_to)
        else:
            instance = Instance(type_name=descriptor.implementation or descriptor.service)

        if cache is not None:
            cache[key] = instance
        return instance


def build_provider(source: str) -> ServiceProviderModel:
    """Collect the registration statements of a generated unit."""
    descriptors: dict[str, list[Descriptor]] = {}
    for raw_line in source.splitlines():
        line = raw_line.strip()
        descriptor = _parse_statement(line)
        if descriptor is not None:
            descriptors.setdefault(descriptor.service, []).append(descriptor)
    return ServiceProviderModel(descriptors=descriptors)


def _parse_statement(line: str) -> Descriptor | None:
    if match := _FORWARD.match(line):
        return Descriptor(
            service=match["service"],
            lifetime=match["lifetime"],
            forward_to=match["impl"],
        )
    if match := _MERGED.match(line):
        return Descriptor(
            service=match["service"],
            lifetime=match["lifetime"],
            implementation=match["impl"],
        )
    if match := _DIRECT.match(line):
        return Descriptor(service=match["service"], lifetime=match["lifetime"])
    return None
