"""Server Generator - emits the service interface, shared adapter and router"""

from .types import ServiceDescriptor, MethodDescriptor
from .naming import service_fqn, method_route, to_snake_case, py_identifier, docstring_lines


class ServerGenerator:
    """Generates the server side of a Twirp service"""

    def __init__(self, service: ServiceDescriptor):
        self.service = service
        self.name = py_identifier(service.name)

    @property
    def shared_name(self) -> str:
        return f"Shared{self.name}"

    @property
    def router_name(self) -> str:
        return f"{to_snake_case(self.service.name)}_router"

    def generate(self) -> list[str]:
        lines = self._interface()
        lines.extend(["", ""])
        lines.extend(self._shared_adapter())
        lines.extend(["", ""])
        lines.extend(self._router())
        return lines

    def _signature(self, method: MethodDescriptor) -> str:
        return (
            f"async def {py_identifier(method.name)}(self, ctx: twirp.Context, "
            f"req: {method.input_type}) -> {method.output_type}:"
        )

    def _interface(self) -> list[str]:
        """Abstract server interface: one operation per method plus service_fqn()"""
        fqn = service_fqn(self.service)
        lines = [f"class {self.name}(abc.ABC):"]
        lines.extend(docstring_lines(
            self.service.comments, f"Server interface for {fqn}", indent="    "))
        lines.extend([
            "",
            "    Error: typing.ClassVar[type]",
            "",
            "    def service_fqn(self) -> str:",
            f'        return "/{fqn}"',
        ])

        for method in self.service.methods:
            lines.extend([
                "",
                "    @abc.abstractmethod",
                f"    {self._signature(method)}",
            ])
            doc = docstring_lines(method.comments, indent="        ")
            lines.extend(doc or ["        ..."])

        return lines

    def _shared_adapter(self) -> list[str]:
        """Adapter forwarding every operation to a shared implementation"""
        lines = [
            f"class {self.shared_name}(twirp.Shared, {self.name}):",
            f'    """{self.name} backed by a shared implementation; calls are forwarded unchanged"""',
        ]
        for method in self.service.methods:
            name = py_identifier(method.name)
            lines.extend([
                "",
                f"    {self._signature(method)}",
                f"        return await self._twirp_inner.{name}(ctx, req)",
            ])
        return lines

    def _router(self) -> list[str]:
        """Router builder chain, routes relative to service_fqn()"""
        lines = [
            f"def {self.router_name}(api: {self.name}) -> twirp.Router:",
            f'    """Routes of {service_fqn(self.service)}, relative to {self.name}.service_fqn()"""',
            "    twirp.require_into_response(api)",
            "    return (",
            "        twirp.TwirpRouterBuilder(api)",
        ]
        for method in self.service.methods:
            name = py_identifier(method.name)
            lines.append(
                f'        .route("{method_route(method)}", {method.input_type}, '
                f"lambda api, ctx, req: api.{name}(ctx, req))"
            )
        lines.extend([
            "        .build()",
            "    )",
        ])
        return lines
