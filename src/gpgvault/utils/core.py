import argparse
import sys

from gpgvault.storage.entries import open_store
from gpgvault.storage.vault import init_vault
from gpgvault.ui.clipboard import copy_to_clipboard
from gpgvault.ui.prompt import prompt_secret
from gpgvault.utils.dataModels import VaultConfig
from gpgvault.utils.errors import AlreadyExists


def cmd_init(args: argparse.Namespace, config: VaultConfig) -> None:
    init_vault(config.vault_root, args.key_id)
    print(f"[+] Initialised vault for {args.key_id.strip()}")


def cmd_create(args: argparse.Namespace, config: VaultConfig) -> None:
    store = open_store(config)
    if store.exists(args.name):
        # fail before asking for a secret that would be thrown away
        raise AlreadyExists(args.name)

    password = prompt_secret("Enter password (leave empty to generate): ")
    password = store.create(args.name, password, length=args.length)
    print(password)


def cmd_get(args: argparse.Namespace, config: VaultConfig) -> None:
    store = open_store(config)
    plaintext = store.get(args.name)

    if args.clip:
        copy_to_clipboard(plaintext.decode("utf-8", errors="replace"))
        print(f"[+] {args.name} copied to clipboard.")
        return

    out = sys.stdout.buffer
    out.write(plaintext)
    if not plaintext.endswith(b"\n"):
        out.write(b"\n")
    out.flush()


def cmd_edit(args: argparse.Namespace, config: VaultConfig) -> None:
    store = open_store(config)
    if store.edit(args.name):
        print(f"[+] Updated {args.name}")
    else:
        print(f"[*] {args.name} unchanged")
