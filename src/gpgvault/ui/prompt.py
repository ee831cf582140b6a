import getpass


def prompt_secret(question: str) -> str:
    return getpass.getpass(question)


def prompt_reply(question: str) -> str:
    try:
        return input(question)
    except EOFError:
        return ""
