"""Client Generator - emits the client interface and its Twirp implementation"""

from .types import ServiceDescriptor, MethodDescriptor
from .naming import service_fqn, route_path, py_identifier, docstring_lines


class ClientGenerator:
    """Generates the client side of a Twirp service"""

    def __init__(self, service: ServiceDescriptor):
        self.service = service
        self.name = py_identifier(service.name)

    @property
    def interface_name(self) -> str:
        return f"{self.name}Client"

    @property
    def impl_name(self) -> str:
        return f"{self.name}ClientImpl"

    def generate(self) -> list[str]:
        lines = self._interface()
        lines.extend(["", ""])
        lines.extend(self._implementation())
        return lines

    def _signature(self, method: MethodDescriptor) -> str:
        return (
            f"async def {py_identifier(method.name)}(self, req: {method.input_type}) "
            f"-> {method.output_type}:"
        )

    def _interface(self) -> list[str]:
        """Client operations; failures raise twirp.ClientError"""
        lines = [
            f"class {self.interface_name}(abc.ABC):",
            f'    """Client for {service_fqn(self.service)}; failures raise twirp.ClientError"""',
        ]
        for method in self.service.methods:
            lines.extend([
                "",
                "    @abc.abstractmethod",
                f"    {self._signature(method)}",
            ])
            doc = docstring_lines(method.comments, indent="        ")
            lines.extend(doc or ["        ..."])
        return lines

    def _implementation(self) -> list[str]:
        """Implementation over a generic twirp.Client"""
        lines = [
            f"class {self.impl_name}({self.interface_name}):",
            "    def __init__(self, client: twirp.Client):",
            "        self._twirp_client = client",
            "",
            "    def __repr__(self):",
            f'        return f"{self.impl_name}({{self._twirp_client!r}})"',
        ]
        for method in self.service.methods:
            lines.extend([
                "",
                f"    {self._signature(method)}",
                f'        return await self._twirp_client.request("{route_path(self.service, method)}", '
                f"req, {method.output_type})",
            ])
        return lines
