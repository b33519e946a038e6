"""CLI entry point for blskeys."""

import argparse
import logging
import sys
from collections.abc import Sequence

import msgspec

from .config import Config, parse_args
from .errors import DecodeError
from .keys import PUBLIC_KEY_BYTES, Keypair, PublicKey, SecretKey, strip_hex_prefix
from .models import KeypairInfo, PublicKeyInfo
from .rng import seeded_rng, system_rng

logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _generate(config: Config) -> KeypairInfo:
    rng = seeded_rng(config.seed) if config.seed is not None else system_rng()
    with Keypair.random(rng) as keypair:
        return KeypairInfo.from_keypair(keypair)


def _pubkey(secret_key_hex: str) -> PublicKeyInfo:
    with SecretKey.from_hex(secret_key_hex) as sk:
        return PublicKeyInfo.from_public_key(PublicKey.from_secret_key(sk))


def _convert(public_key_hex: str) -> PublicKeyInfo:
    if len(strip_hex_prefix(public_key_hex)) == 2 * PUBLIC_KEY_BYTES:
        pk = PublicKey.from_hex(public_key_hex)
    else:
        pk = PublicKey.from_uncompressed_hex(public_key_hex)
    return PublicKeyInfo.from_public_key(pk)


def run(args: argparse.Namespace, config: Config) -> KeypairInfo | PublicKeyInfo:
    """Execute the selected subcommand and return its output record."""
    if args.command == "generate":
        return _generate(config)
    if args.command == "pubkey":
        return _pubkey(args.secret_key)
    if args.command == "convert":
        return _convert(args.public_key)
    raise ValueError(f"Unknown command: {args.command}")


def render(result: KeypairInfo | PublicKeyInfo, output_format: str) -> str:
    """Render an output record as JSON or as ``name: value`` lines."""
    if output_format == "json":
        return msgspec.json.encode(result).decode("utf-8")

    lines = []
    for name, value in msgspec.structs.asdict(result).items():
        if isinstance(value, PublicKeyInfo):
            lines.extend(
                f"{field}: {field_value}"
                for field, field_value in msgspec.structs.asdict(value).items()
            )
        else:
            lines.append(f"{name}: {value}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point."""
    try:
        args, config = parse_args(argv)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(config.normalized_log_level)

    try:
        result = run(args, config)
    except DecodeError as e:
        logger.debug(f"Decode failed: {type(e).__name__}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        # Malformed hex
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(render(result, config.output_format))
