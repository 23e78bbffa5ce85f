"""
Prompts - Interactive console questions
Text input (optionally masked/mandatory) and single-choice selector
"""

import getpass
import logging
import sys
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)


class PromptConfigError(ValueError):
    """Raised when a prompt is called with malformed options"""


class PromptAborted(RuntimeError):
    """Raised when input ends before a mandatory answer was given"""


def _read(reader: Callable[[str], str], label: str, to_stderr: bool = True) -> Optional[str]:
    # Keep stdout for the table, getpass writes its own prompt to the tty
    if to_stderr:
        print(label, end="", file=sys.stderr, flush=True)
        label = ""
    try:
        return reader(label)
    except EOFError:
        return None


def ask_input(message: str, mandatory: bool = False, hide: bool = False,
              input_func: Callable[[str], str] = input,
              password_func: Callable[[str], str] = getpass.getpass) -> Optional[str]:
    """
    Ask a free-text question

    Args:
        message: Question shown to the user
        mandatory: Reject blank answers and ask again
        hide: Mask the typed answer
        input_func: Reader for visible input
        password_func: Reader for masked input

    Returns:
        The answer, or None if input ended on an optional question
    """
    if not isinstance(message, str) or not message.strip():
        raise PromptConfigError("Prompt message must be a non-empty string")

    reader = password_func if hide else input_func
    label = f"{message}: "

    while True:
        reply = _read(reader, label, to_stderr=not hide)
        if reply is None:
            if mandatory:
                raise PromptAborted(f"No answer given for '{message}'")
            return None
        if not mandatory or reply.strip():
            return reply
        print("Resposta obrigatória.", file=sys.stderr)


def _validate_options(options: Sequence) -> None:
    if not isinstance(options, (list, tuple)):
        raise PromptConfigError("Selector options must be a list")
    for option in options:
        text = getattr(option, 'text', None)
        key = getattr(option, 'key', None)
        if not isinstance(text, str) or not isinstance(key, str):
            raise PromptConfigError(f"Invalid selector option: {option!r}")


def ask_selector(message: str, options: Sequence,
                 input_func: Callable[[str], str] = input) -> Optional[str]:
    """
    Ask the user to pick one option

    Options are objects with ``text`` and ``key`` string attributes.
    An empty answer returns None so the caller can apply its default.
    """
    if not isinstance(message, str) or not message.strip():
        raise PromptConfigError("Prompt message must be a non-empty string")
    _validate_options(options)
    if not options:
        return None

    print(message, file=sys.stderr)
    for idx, option in enumerate(options, start=1):
        print(f"  {idx}) {option.text}", file=sys.stderr)

    while True:
        reply = _read(input_func, f"Opção [1-{len(options)}]: ")
        if reply is None or not reply.strip():
            return None
        try:
            idx = int(reply.strip())
        except ValueError:
            idx = 0
        if 1 <= idx <= len(options):
            return options[idx - 1].key
        print("Opção inválida.", file=sys.stderr)
