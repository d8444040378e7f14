"""
Twirp Binding Generator

Reads resolved service descriptors (JSON) and generates Python server
interfaces, routers and clients for them.

Usage:
    twirpgen services.json --output generated/services_twirp.py
    twirpgen services.json -o generated/ --runtime-module myapp.twirp
"""

import argparse
import json
import time
from pathlib import Path

from .types import load_services
from .naming import service_fqn
from .service_generator import DEFAULT_RUNTIME_MODULE, ServiceGenerator


def load_descriptor_file(path: Path):
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: invalid descriptor JSON: {e}") from e
    return load_services(data)


def main(argv=None):
    start_time = time.perf_counter()

    parser = argparse.ArgumentParser(description="Generate Twirp bindings from service descriptors")
    parser.add_argument("descriptor", nargs="?", help="Path to descriptor JSON (positional)")
    parser.add_argument("--descriptor", dest="descriptor_opt", help="Path to descriptor JSON (alternative)")
    parser.add_argument("--output", "-o", default="generated",
                        help="Output .py file, or directory to write <stem>_twirp.py into")
    parser.add_argument("--runtime-module", default=DEFAULT_RUNTIME_MODULE,
                        help="Module generated code imports as twirp")
    args = parser.parse_args(argv)

    descriptor = args.descriptor or args.descriptor_opt
    if not descriptor:
        parser.error("descriptor file is required (positional or --descriptor)")

    descriptor_path = Path(descriptor)
    if not descriptor_path.is_file():
        parser.error(f"descriptor file not found: {descriptor_path}")

    services = load_descriptor_file(descriptor_path)

    output = Path(args.output)
    if output.suffix != ".py":
        output = output / f"{descriptor_path.stem.replace('-', '_')}_twirp.py"
    output.parent.mkdir(parents=True, exist_ok=True)

    generator = ServiceGenerator(runtime_module=args.runtime_module)
    output.write_text(generator.generate_module(services))

    for service in services:
        print(f"  {service_fqn(service)}: {len(service.methods)} method(s)")
    print(f"Generated: {output}")

    elapsed = time.perf_counter() - start_time
    print(f"Generation completed in {elapsed*1000:.2f} ms")
    return 0
