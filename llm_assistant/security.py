import re
import shlex
from typing import List

# Hints only: nothing here blocks a command. The user's confirmation is the gate.

PRIVILEGE_COMMANDS = {"sudo", "su", "doas", "pkexec"}

DESTRUCTIVE_COMMANDS = {
    "mkfs": "formats a filesystem",
    "dd": "writes raw data to files or devices",
    "shred": "irreversibly overwrites files",
    "shutdown": "powers off the machine",
    "reboot": "restarts the machine",
    "halt": "stops the machine",
    "poweroff": "powers off the machine",
}

_SEGMENT_SPLIT = re.compile(r"\|\||&&|[;|&\n]")
_FORK_BOMB = re.compile(r":\s*\(\s*\)\s*\{.*:\s*\|\s*:.*\}")
_DEVICE_WRITE = re.compile(r">\s*/dev/(sd|hd|nvme|vd|xvd|mmcblk|disk)\w*")
_DOWNLOAD_TO_SHELL = re.compile(r"\b(curl|wget)\b[^|]*\|\s*(sudo\s+)?(ba|z|k|da)?sh\b")


def _segment_words(segment: str) -> List[str]:
    try:
        return shlex.split(segment)
    except ValueError:
        return segment.split()


def _has_recursive_force(words: List[str]) -> bool:
    flags = "".join(w.lstrip("-") for w in words[1:] if w.startswith("-") and not w.startswith("--"))
    long_flags = {w for w in words[1:] if w.startswith("--")}
    recursive = "r" in flags.lower() or "--recursive" in long_flags
    force = "f" in flags or "--force" in long_flags
    return recursive and force


def assess_command(command: str) -> List[str]:
    """
    Returns human-readable warnings about risky parts of a shell command.

    An empty list means nothing stood out. The checks are heuristics over the
    command text and are not a sandbox.
    """
    if not command or not command.strip():
        return []

    warnings: List[str] = []

    def warn(message: str):
        if message not in warnings:
            warnings.append(message)

    for segment in _SEGMENT_SPLIT.split(command):
        words = _segment_words(segment.strip())
        while words and words[0] in PRIVILEGE_COMMANDS:
            warn(f"Runs with elevated privileges via '{words[0]}'.")
            words = words[1:]
            while words and words[0].startswith("-"):
                words = words[1:]
        if not words:
            continue

        program = words[0].rsplit("/", 1)[-1]
        if program == "rm" and _has_recursive_force(words):
            warn("Recursively force-deletes files ('rm -rf').")
        elif program.startswith("mkfs"):
            warn(f"'{program}' {DESTRUCTIVE_COMMANDS['mkfs']}.")
        elif program in DESTRUCTIVE_COMMANDS:
            warn(f"'{program}' {DESTRUCTIVE_COMMANDS[program]}.")

    if _FORK_BOMB.search(command):
        warn("Looks like a fork bomb.")
    if _DEVICE_WRITE.search(command):
        warn("Writes directly to a block device.")
    if _DOWNLOAD_TO_SHELL.search(command):
        warn("Pipes a downloaded script straight into a shell.")

    return warnings
