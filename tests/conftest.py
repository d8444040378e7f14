from dataclasses import dataclass

import pytest


@dataclass
class HelloRequest:
    name: str = ""


@dataclass
class HelloResponse:
    message: str = ""


@dataclass
class CountRequest:
    n: int = 0


@dataclass
class CountResponse:
    total: int = 0


MESSAGES = {
    "HelloRequest": HelloRequest,
    "HelloResponse": HelloResponse,
    "CountRequest": CountRequest,
    "CountResponse": CountResponse,
}


@pytest.fixture
def compile_source():
    """Execute generated source with the test message classes in scope"""
    def _compile(source: str) -> dict:
        namespace = dict(MESSAGES)
        exec(compile(source, "<generated>", "exec"), namespace)
        return namespace
    return _compile
