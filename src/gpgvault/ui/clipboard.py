import pyperclip

from gpgvault.utils.errors import ClipboardUnavailable


def copy_to_clipboard(text: str) -> None:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardUnavailable(f"failed to copy to clipboard: {exc}") from exc
