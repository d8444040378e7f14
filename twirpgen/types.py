"""Data types for service descriptors"""

from dataclasses import dataclass, field

from .naming import to_snake_case


@dataclass(frozen=True)
class Comments:
    """Comment lines attached to a service or method definition"""
    leading: tuple[str, ...] = ()
    trailing: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data) -> 'Comments':
        if not data:
            return cls()
        if isinstance(data, str):
            return cls(leading=tuple(data.splitlines()))
        if isinstance(data, (list, tuple)):
            return cls(leading=tuple(data))
        return cls(
            leading=tuple(data.get('leading', ())),
            trailing=tuple(data.get('trailing', ())),
        )

    def lines(self) -> list[str]:
        return [*self.leading, *self.trailing]


@dataclass(frozen=True)
class MethodDescriptor:
    """Service method"""
    name: str
    proto_name: str
    input_type: str
    output_type: str
    comments: Comments = field(default_factory=Comments)

    @classmethod
    def from_proto(cls, proto_name: str, input_type: str, output_type: str,
                   comments: Comments = Comments()) -> 'MethodDescriptor':
        """Build a method whose identifier is derived from its wire name"""
        return cls(
            name=to_snake_case(proto_name),
            proto_name=proto_name,
            input_type=input_type,
            output_type=output_type,
            comments=comments,
        )

    @classmethod
    def from_dict(cls, data: dict) -> 'MethodDescriptor':
        proto_name = data['proto_name']
        return cls(
            name=data.get('name') or to_snake_case(proto_name),
            proto_name=proto_name,
            input_type=data['input_type'],
            output_type=data['output_type'],
            comments=Comments.from_dict(data.get('comments')),
        )


@dataclass(frozen=True)
class ServiceDescriptor:
    """Resolved RPC service definition"""
    name: str
    package: str
    proto_name: str
    methods: tuple[MethodDescriptor, ...] = ()
    comments: Comments = field(default_factory=Comments)

    @classmethod
    def from_dict(cls, data: dict) -> 'ServiceDescriptor':
        proto_name = data['proto_name']
        return cls(
            name=data.get('name') or proto_name,
            package=data.get('package', ''),
            proto_name=proto_name,
            methods=tuple(MethodDescriptor.from_dict(m) for m in data.get('methods', ())),
            comments=Comments.from_dict(data.get('comments')),
        )


def load_services(data) -> list[ServiceDescriptor]:
    """Build descriptors from a decoded JSON document.

    Accepts either ``{"services": [...]}``, a bare list of services,
    or a single service object.
    """
    if isinstance(data, dict) and 'services' in data:
        data = data['services']
    if isinstance(data, dict):
        data = [data]
    return [ServiceDescriptor.from_dict(s) for s in data]
