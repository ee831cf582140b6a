import secrets

from gpgvault.utils.dataModels import DEFAULT_PASSWORD_LENGTH

CHARSETS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
    "0123456789",
    "!\"#$%&'()*+,-./\\:;?@[]^_`{|}~ ",
)


def generate_password(length: int = DEFAULT_PASSWORD_LENGTH) -> str:
    """Pick a character class uniformly, then a character uniformly within it.

    Classes are not weighted by size, so every class has a 1/4 chance per
    character regardless of how many characters it holds.
    """
    if length < 1:
        raise ValueError("password length must be positive")
    chars = []
    for _ in range(length):
        charset = secrets.choice(CHARSETS)
        chars.append(secrets.choice(charset))
    return "".join(chars)
