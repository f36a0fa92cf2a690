"""argonhash CLI: hash and verify secrets from the shell."""

import argparse
import getpass
import logging
import sys

from argonhash import config as options
from argonhash.errors import HashError
from argonhash.hasher import create_hasher

logger = logging.getLogger("argonhash.cli")


def main(argv: list[str] | None = None) -> None:
    """Entry point for the ``argonhash`` console script."""
    parser = argparse.ArgumentParser(prog="argonhash", description="Argon2 password hashing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    hash_cmd = sub.add_parser("hash", help="Hash a secret read from stdin")
    hash_cmd.add_argument("--iterations", type=int, help="Time cost (default 8)")
    hash_cmd.add_argument("--memory-kb", type=int, help="Memory cost in KiB (default 65536)")
    hash_cmd.add_argument("--parallelism", type=int, help="Number of lanes (default 8)")
    hash_cmd.add_argument("--hash-length", type=int, help="Output length in bytes (default 64)")
    hash_cmd.add_argument("--salt-length", type=int, help="Salt length in bytes (default 64)")
    hash_cmd.add_argument("--variant", choices=["id", "i", "d"], help="Argon2 variant (default id)")
    hash_cmd.add_argument("--version", choices=["10", "13"], help="Argon2 version (default 13)")

    verify_cmd = sub.add_parser("verify", help="Verify a secret read from stdin against a hash")
    verify_cmd.add_argument("encoded_hash", help='Encoded hash (e.g. "$argon2id$v=19$...")')

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.command == "hash":
            hasher = create_hasher(*_options_from_args(args))
            print(hasher.encode(_read_secret()))
        elif args.command == "verify":
            hasher = create_hasher()
            if hasher.verify(_read_secret(), args.encoded_hash):
                print("match")
            else:
                print("mismatch")
                sys.exit(1)
    except HashError as exc:
        logger.debug("Command '%s' failed with code %s", args.command, exc.code)
        print(f"error: {exc.message}", file=sys.stderr)
        sys.exit(2)


def _options_from_args(args: argparse.Namespace) -> list[options.Option]:
    """Turn the provided ``hash`` flags into config options, in a fixed order."""
    factories = (
        ("iterations", options.iterations),
        ("memory_kb", options.memory_kb),
        ("parallelism", options.parallelism),
        ("hash_length", options.hash_length),
        ("salt_length", options.salt_length),
        ("variant", options.variant),
        ("version", options.version),
    )
    return [
        factory(getattr(args, name))
        for name, factory in factories
        if getattr(args, name) is not None
    ]


def _read_secret() -> str:
    """Prompt on a terminal, otherwise read one line from stdin."""
    if sys.stdin.isatty():
        return getpass.getpass("Secret: ")
    return sys.stdin.readline().rstrip("\r\n")
