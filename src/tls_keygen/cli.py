"""Command line interface for tls-keygen."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from .core.errors import (
    ConfigurationError,
    EncodingError,
    GenerationError,
    InvalidParameterError,
)
from .core.models import Algorithm, ECDSACurve, KeyRequest
from .generator import KeyGenerator

OUTPUT_FIELDS = (
    "private_key_pem",
    "public_key_pem",
    "public_key_openssh",
    "public_key_fingerprint_md5",
)


class _BlockDumper(yaml.SafeDumper):
    pass


def _represent_str(dumper: yaml.SafeDumper, data: str):
    # PEM documents read better as literal blocks
    style = "|" if "\n" in data else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", data, style=style)


_BlockDumper.add_representer(str, _represent_str)


def _setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger = logging.getLogger("tls_keygen")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def build_request(args: argparse.Namespace) -> KeyRequest:
    """Combine the optional config file with command line overrides."""
    params: dict = {}
    if args.config is not None:
        params = KeyRequest.from_config(args.config).model_dump()

    overrides = {
        "algorithm": args.algorithm,
        "rsa_bits": args.rsa_bits,
        "ecdsa_curve": args.ecdsa_curve,
    }
    params.update({k: v for k, v in overrides.items() if v is not None})
    return KeyRequest.from_params(**params)


def render(outputs: dict[str, str], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(outputs, indent=2) + "\n"
    return yaml.dump(outputs, Dumper=_BlockDumper, sort_keys=False)


def cmd_generate(args: argparse.Namespace) -> int:
    try:
        request = build_request(args)
        material = KeyGenerator().generate(request)
    except (InvalidParameterError, ConfigurationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (GenerationError, EncodingError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 3

    outputs = material.to_outputs()
    if args.field:
        value = outputs[args.field]
        print(value, end="" if value.endswith("\n") else "\n")
    else:
        sys.stdout.write(render(outputs, args.format))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tls-keygen", description="Generate private keys and their public encodings"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Generate a new key pair")
    g.add_argument("--algorithm", help=f"One of {', '.join(a.value for a in Algorithm)}")
    g.add_argument("--rsa-bits", type=int, help="RSA modulus size (default 2048)")
    g.add_argument(
        "--ecdsa-curve", help=f"One of {', '.join(c.value for c in ECDSACurve)} (default P224)"
    )
    g.add_argument("--config", type=Path, help="YAML file with key request parameters")
    g.add_argument("--format", choices=("yaml", "json"), default="yaml")
    g.add_argument("--field", choices=OUTPUT_FIELDS, help="Print a single output verbatim")

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    if args.command == "generate":
        return cmd_generate(args)

    raise SystemExit("Unknown command")


if __name__ == "__main__":
    raise SystemExit(main())
