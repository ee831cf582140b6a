import argparse

from gpgvault.storage.entries import open_store
from gpgvault.ui.prompt import prompt_reply
from gpgvault.utils.dataModels import VaultConfig
from gpgvault.utils.errors import EntryNotFound


def cmd_rm(args: argparse.Namespace, config: VaultConfig) -> None:
    store = open_store(config)
    if not store.exists(args.name):
        raise EntryNotFound(args.name)

    answer = prompt_reply("Are you sure you want to delete this entry? [y/N] ")
    if not store.remove(args.name, answer):
        print("[*] Nothing to do")
        return
    print(f"[+] Removed {args.name}")


def cmd_mv(args: argparse.Namespace, config: VaultConfig) -> None:
    store = open_store(config)
    store.move(args.source, args.target)
    print(f"[+] Moved {args.source} -> {args.target}")
