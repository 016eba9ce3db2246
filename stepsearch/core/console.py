"""
Console output helpers.
Coloured tags used by every module that reports progress.
"""

RED_COLOR = "\033[91m"
GREEN_COLOR = "\033[92m"
YELLOW_COLOR = "\033[93m"
BLUE_COLOR = "\033[94m"
RESET_COLOR = "\033[0m"


def label(name: str, color: str = BLUE_COLOR) -> str:
    return f"[{color}{name}{RESET_COLOR}]"


def log(name: str, message: str, color: str = BLUE_COLOR, error: bool = False) -> None:
    if error:
        message = f"{RED_COLOR}{message}{RESET_COLOR}"
    print(f"{label(name, color)} {message}")
