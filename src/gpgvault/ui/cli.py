import argparse

from gpgvault.utils.core import cmd_create, cmd_edit, cmd_get, cmd_init
from gpgvault.utils.dataModels import DEFAULT_PASSWORD_LENGTH
from gpgvault.utils.maintain import cmd_mv, cmd_rm


def _positive(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError("length must be at least 1")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="vault", description="GPG-encrypted secret vault")
    p.add_argument("--vault", help="Vault directory (default: $VAULT_DIR or ~/.local/vault)")
    p.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_init = sub.add_parser("init", help="Initialise the vault for a GPG key")
    p_init.add_argument("key_id", help="GPG key id or user id to encrypt entries to")
    p_init.set_defaults(func=cmd_init)

    p_create = sub.add_parser("create", help="Create an entry (prompts for the value)")
    p_create.add_argument("name", help="Entry name, e.g. web/github")
    p_create.add_argument("-l", "--length", type=_positive, default=DEFAULT_PASSWORD_LENGTH,
                          help="Length of a generated password")
    p_create.set_defaults(func=cmd_create)

    p_get = sub.add_parser("get", help="Decrypt and print an entry")
    p_get.add_argument("name", help="Entry name")
    p_get.add_argument("-c", "--clip", action="store_true",
                       help="Copy to clipboard instead of printing to stdout")
    p_get.set_defaults(func=cmd_get)

    p_edit = sub.add_parser("edit", help="Edit an entry in $EDITOR")
    p_edit.add_argument("name", help="Entry name")
    p_edit.set_defaults(func=cmd_edit)

    p_rm = sub.add_parser("rm", help="Remove an entry")
    p_rm.add_argument("name", help="Entry name")
    p_rm.set_defaults(func=cmd_rm)

    p_mv = sub.add_parser("mv", help="Move or rename an entry")
    p_mv.add_argument("source", help="Current entry name")
    p_mv.add_argument("target", help="New entry name")
    p_mv.set_defaults(func=cmd_mv)

    return p
