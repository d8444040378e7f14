"""Name normalization and derived wire paths"""

import keyword
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Comments, MethodDescriptor, ServiceDescriptor


def service_fqn(service: 'ServiceDescriptor') -> str:
    """Fully qualified service name: package.ProtoName"""
    return f"{service.package}.{service.proto_name}"


def method_route(method: 'MethodDescriptor') -> str:
    """Route path relative to the service prefix"""
    return f"/{method.proto_name}"


def route_path(service: 'ServiceDescriptor', method: 'MethodDescriptor') -> str:
    """Full wire path of a method: /package.Service/Method"""
    return f"/{service_fqn(service)}{method_route(method)}"


def to_snake_case(name: str) -> str:
    """Convert a wire name to snake_case

    Examples:
        SayHello -> say_hello
        GetHTTPStatus -> get_http_status
        already_snake -> already_snake
    """
    name = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', name)
    name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)
    return name.replace('-', '_').lower()


def py_identifier(name: str) -> str:
    """Escape names that collide with Python keywords"""
    if keyword.iskeyword(name):
        return f"{name}_"
    return name


def docstring_lines(comments: 'Comments', fallback: str = "", indent: str = "") -> list[str]:
    """Render comments as a docstring, one-line when possible"""
    text = [line.rstrip() for line in comments.lines()]
    while text and not text[0].strip():
        text.pop(0)
    while text and not text[-1].strip():
        text.pop()
    if not text:
        text = [fallback] if fallback else []
    if not text:
        return []

    escaped = [_escape(line) for line in text]
    if len(escaped) == 1:
        return [f'{indent}"""{escaped[0].strip()}"""']

    lines = [f'{indent}"""']
    for line in escaped:
        lines.append(f"{indent}{line}" if line.strip() else "")
    lines.append(f'{indent}"""')
    return lines


def _escape(line: str) -> str:
    line = line.replace('\\', '\\\\').replace('"""', '\\"\\"\\"')
    if line.endswith('"'):
        line = line[:-1] + '\\"'
    return line
