"""
Credentials - Login/password resolution
Uses pre-supplied values and prompts for whatever is missing
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .prompts import ask_input

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    login: str
    password: str

    def __repr__(self):
        return f"Credentials(login={self.login[:2]}***, password=***)"


def resolve_credentials(login: Optional[str] = None, password: Optional[str] = None,
                        ask: Callable[..., Optional[str]] = ask_input) -> Credentials:
    """
    Resolve credentials, prompting for missing fields

    Args:
        login: Pre-supplied login (CPF)
        password: Pre-supplied password
        ask: Prompt function, same signature as ask_input

    Returns:
        Credentials
    """
    if not login:
        login = ask('Seu CPF', mandatory=True)
    if not password:
        password = ask('Sua senha', mandatory=True, hide=True)

    logger.debug("Credentials resolved")
    return Credentials(login=login.strip(), password=password)
