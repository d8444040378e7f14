"""Service Generator - runs every emission pass for a service descriptor"""

from typing import Iterable

from .types import ServiceDescriptor
from .naming import service_fqn
from .server_generator import ServerGenerator
from .client_generator import ClientGenerator

DEFAULT_RUNTIME_MODULE = "twirpgen.runtime"


class GenerationError(RuntimeError):
    """Generated code could not be written; the output must be discarded"""


class ServiceGenerator:
    """Generates Twirp server and client bindings for one service at a time.

    Generation is stateless: every call reads only the descriptor it is given,
    so one instance can be reused for any number of services.
    """

    def __init__(self, runtime_module: str = DEFAULT_RUNTIME_MODULE):
        self.runtime_module = runtime_module

    def _runtime_import(self) -> str:
        package, _, module = self.runtime_module.rpartition(".")
        if package:
            return f"from {package} import {module} as twirp"
        return f"import {module} as twirp"

    def generate_source(self, service: ServiceDescriptor) -> str:
        """Return the bindings for a service as source text"""
        lines = [
            "",
            "import abc",
            "import typing",
            "",
            self._runtime_import(),
            "",
            "",
        ]
        lines.extend(ServerGenerator(service).generate())
        lines.extend(["", ""])
        lines.extend(ClientGenerator(service).generate())
        return "\n".join(lines) + "\n"

    def generate(self, service: ServiceDescriptor, buf) -> None:
        """Append the bindings for a service to buf.

        The text is produced in full before anything is written, and a failed
        write raises GenerationError.
        """
        source = self.generate_source(service)
        try:
            buf.write(source)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            raise GenerationError(
                f"failed to write bindings for {service_fqn(service)}: {e}"
            ) from e

    def generate_module(self, services: Iterable[ServiceDescriptor]) -> str:
        """Generate a complete module for several services"""
        parts = [
            '"""',
            "AUTO-GENERATED Twirp bindings",
            "DO NOT EDIT - Generated from service descriptors",
            '"""',
        ]
        text = "\n".join(parts) + "\n"
        for service in services:
            text += self.generate_source(service)
        return text


def service_generator(**options) -> ServiceGenerator:
    """Create the generator a build pipeline registers for its services"""
    return ServiceGenerator(**options)
