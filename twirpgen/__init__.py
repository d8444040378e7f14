"""
Twirp Binding Generator Package

Takes resolved RPC service descriptors and generates Python:
  1. Server interface (abstract service class)
  2. Shared-ownership adapter forwarding to a shared implementation
  3. Router binding /package.Service/Method paths to operations
  4. Client interface
  5. Client implementation over a generic Twirp client
"""

from .types import Comments, MethodDescriptor, ServiceDescriptor, load_services
from .naming import service_fqn, route_path, method_route, to_snake_case, py_identifier
from .server_generator import ServerGenerator
from .client_generator import ClientGenerator
from .service_generator import GenerationError, ServiceGenerator, service_generator

__all__ = [
    'Comments', 'MethodDescriptor', 'ServiceDescriptor', 'load_services',
    'service_fqn', 'route_path', 'method_route', 'to_snake_case', 'py_identifier',
    'ServerGenerator', 'ClientGenerator', 'ServiceGenerator', 'GenerationError',
    'service_generator',
]
