#!/usr/bin/env python3
"""
GPG Vault – one encrypted file per secret

Every entry lives at <vault>/<name>.gpg and is encrypted to the single key id
recorded in <vault>/.keyid. Encryption and decryption are done by the gpg
executable; this tool only moves envelopes around and keeps plaintext off disk.

Layout:
  vault/
    .keyid               # key id entries are encrypted to
    web/github.gpg       # entry "web/github"

Commands:
  init <key-id>        Initialise the vault
  create <name>        Create an entry (empty input generates a password)
  get <name> [--clip]  Decrypt an entry to stdout or the clipboard
  edit <name>          Edit an entry in $VISUAL / $EDITOR
  rm <name>            Remove an entry after confirmation
  mv <src> <dst>       Move an entry, creating parent directories

Environment:
  VAULT_DIR            Vault directory (default ~/.local/vault)
  VISUAL, EDITOR       Editor for `edit` (default /usr/bin/vi)
  VAULT_SCRATCH_DIR    Where `edit` keeps its scratch copy (default $TMPDIR)
  VAULT_GPG            gpg executable (default gpg)
"""
from __future__ import annotations

import logging
import sys

from gpgvault.ui.cli import build_parser
from gpgvault.utils.config import load_config
from gpgvault.utils.errors import VaultError


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[!] %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    config = load_config(vault_dir=args.vault)

    try:
        args.func(args, config)
    except VaultError as e:
        print(f"[!] {e}", file=sys.stderr)
        return e.exit_code
    except OSError as e:
        print(f"[!] {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
