"""Configuration management using msgspec Struct."""

import argparse
import os
from collections.abc import Sequence

import msgspec

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("json", "text")


class Config(msgspec.Struct, frozen=True):
    """CLI configuration using msgspec Struct."""

    # Logging
    log_level: str = "WARNING"

    # Output
    output_format: str = "json"

    # Deterministic key generation (insecure, for test vectors only)
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {set(LOG_LEVELS)}, got {self.log_level}")

        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {set(OUTPUT_FORMATS)}, got {self.output_format}"
            )

        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")

    @property
    def normalized_log_level(self) -> str:
        """Return normalized uppercase log level."""
        return self.log_level.upper()


def build_parser(defaults: Config | None = None) -> argparse.ArgumentParser:
    """Build the argument parser for the blskeys command.

    Option defaults come from ``defaults``, normally the result of
    ``get_config_from_env()``.
    """
    if defaults is None:
        defaults = Config()

    parser = argparse.ArgumentParser(
        prog="blskeys",
        description="blskeys - BLS12-381 key generation and encoding",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=defaults.normalized_log_level,
        help="Logging level",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=defaults.output_format,
        help="Output format",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a random keypair")
    generate.add_argument(
        "--seed",
        type=int,
        default=defaults.seed,
        help="Seed a non-cryptographic RNG for reproducible keys (never use for real keys)",
    )

    pubkey = subparsers.add_parser("pubkey", help="Derive the public key of a secret key")
    pubkey.add_argument("secret_key", help="Secret key as 64 hex characters")

    convert = subparsers.add_parser(
        "convert", help="Decode a public key and print both encodings"
    )
    convert.add_argument(
        "public_key",
        help="Public key as 96 (compressed) or 192 (uncompressed) hex characters",
    )

    return parser


def get_config(args: argparse.Namespace) -> Config:
    """Build configuration from parsed command line arguments."""
    config_dict: dict[str, object] = {
        "log_level": args.log_level,
        "output_format": args.output_format,
        "seed": getattr(args, "seed", None),
    }

    try:
        config = msgspec.convert(config_dict, Config)
    except msgspec.ValidationError as e:
        raise ValueError(f"Configuration validation error: {e}")

    return config


def get_config_from_env() -> Config:
    """Load configuration from ``BLSKEYS_*`` environment variables."""
    config_dict: dict[str, object] = {
        "log_level": os.getenv("BLSKEYS_LOG_LEVEL", "WARNING"),
        "output_format": os.getenv("BLSKEYS_FORMAT", "json"),
        "seed": int(os.environ["BLSKEYS_SEED"]) if os.getenv("BLSKEYS_SEED") else None,
    }

    try:
        config = msgspec.convert(config_dict, Config)
    except msgspec.ValidationError as e:
        raise ValueError(f"Configuration validation error: {e}")

    return config


def parse_args(argv: Sequence[str] | None = None) -> tuple[argparse.Namespace, Config]:
    """Parse command line arguments and return them with the configuration.

    Environment variables supply defaults; command line flags override them.
    """
    args = build_parser(get_config_from_env()).parse_args(argv)
    return args, get_config(args)
