from twirpgen.naming import (
    docstring_lines, method_route, py_identifier, route_path, service_fqn, to_snake_case,
)
from twirpgen.types import Comments, MethodDescriptor, ServiceDescriptor


def _greeter(package="example"):
    method = MethodDescriptor("SayHello", "SayHello", "HelloRequest", "HelloResponse")
    return ServiceDescriptor("Greeter", package, "Greeter", (method,)), method


def test_service_fqn_and_route_path():
    service, method = _greeter()
    assert service_fqn(service) == "example.Greeter"
    assert method_route(method) == "/SayHello"
    assert route_path(service, method) == "/example.Greeter/SayHello"


def test_route_path_follows_formula_for_dotted_and_empty_packages():
    service, method = _greeter("acme.v1")
    assert route_path(service, method) == "/acme.v1.Greeter/SayHello"

    service, method = _greeter("")
    assert service_fqn(service) == ".Greeter"


def test_to_snake_case():
    assert to_snake_case("SayHello") == "say_hello"
    assert to_snake_case("GetHTTPStatus") == "get_http_status"
    assert to_snake_case("ListV2Items") == "list_v2_items"
    assert to_snake_case("already_snake") == "already_snake"


def test_py_identifier_escapes_keywords_only():
    assert py_identifier("SayHello") == "SayHello"
    assert py_identifier("import") == "import_"
    assert py_identifier("async") == "async_"
    # soft keywords are valid identifiers
    assert py_identifier("match") == "match"


def test_docstring_lines():
    assert docstring_lines(Comments()) == []
    assert docstring_lines(Comments(), "Fallback", "    ") == ['    """Fallback"""']
    assert docstring_lines(Comments(leading=(" Sends a greeting",))) == ['"""Sends a greeting"""']

    lines = docstring_lines(Comments(leading=(" First", "", " Second"), trailing=(" Third",)), indent="  ")
    assert lines == ['  """', "   First", "", "   Second", "   Third", '  """']


def test_docstring_lines_escapes_quotes():
    lines = docstring_lines(Comments(leading=('Say """hi""" to "you"',)))
    text = "\n".join(lines)
    assert compile(text, "<doc>", "eval")
    assert eval(text) == 'Say """hi""" to "you"'
