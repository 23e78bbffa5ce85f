#!/usr/bin/env python3
"""
Test Prompts and Credentials
Interactive questions driven by scripted answers
"""

import io
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from notas_ecampus.utils import (
    ask_input,
    ask_selector,
    resolve_credentials,
    PromptConfigError,
    PromptAborted
)
from notas_ecampus.resources import TermOption


def scripted(*answers):
    """Reader returning answers in order, then EOF"""
    queue = list(answers)
    asked = []

    def reader(label):
        asked.append(label)
        if not queue:
            raise EOFError
        return queue.pop(0)

    reader.asked = asked
    return reader


def test_ask_input_rejects_blank_when_mandatory():
    reader = scripted("", "   ", "12345678900")
    assert ask_input("Seu CPF", mandatory=True, input_func=reader) == "12345678900"
    assert len(reader.asked) == 3


def test_ask_input_optional_accepts_blank():
    assert ask_input("Apelido", input_func=scripted("")) == ""
    assert ask_input("Apelido", input_func=scripted()) is None


def test_ask_input_hidden_uses_password_reader():
    visible = scripted("wrong")
    hidden = scripted("s3cret")
    assert ask_input("Sua senha", hide=True, input_func=visible, password_func=hidden) == "s3cret"
    assert visible.asked == []


def test_ask_input_mandatory_eof():
    with pytest.raises(PromptAborted):
        ask_input("Seu CPF", mandatory=True, input_func=scripted(""))


def test_ask_input_bad_message():
    with pytest.raises(PromptConfigError):
        ask_input("", input_func=scripted("x"))


def test_ask_selector():
    options = [TermOption("1º Período", "1"), TermOption("2º Período", "2")]
    assert ask_selector("Período", options, input_func=scripted("2")) == "2"
    assert ask_selector("Período", options, input_func=scripted("")) is None
    assert ask_selector("Período", options, input_func=scripted("9", "abc", "1")) == "1"


def test_ask_selector_bad_options():
    with pytest.raises(PromptConfigError):
        ask_selector("Período", [{"text": "1", "key": "1"}], input_func=scripted("1"))
    with pytest.raises(PromptConfigError):
        ask_selector("Período", [TermOption("1º", 1)], input_func=scripted("1"))


def test_prompts_keep_stdout_clean(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'stdin', io.StringIO("1\n12345\n"))

    options = [TermOption("1º Período", "1")]
    assert ask_selector("Período", options) == "1"
    assert ask_input("Seu CPF", mandatory=True) == "12345"

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Opção [1-1]: " in captured.err
    assert "Seu CPF: " in captured.err


def test_resolve_credentials_prompts_both():
    calls = []

    def ask(message, mandatory=False, hide=False):
        calls.append((message, mandatory, hide))
        return "123" if not hide else "pw"

    creds = resolve_credentials(None, None, ask=ask)
    assert creds.login == "123"
    assert creds.password == "pw"
    assert calls == [("Seu CPF", True, False), ("Sua senha", True, True)]


def test_resolve_credentials_blank_not_accepted():
    reader = scripted("", "98765432100")
    hidden = scripted("  ", "pw")

    def ask(message, mandatory=False, hide=False):
        return ask_input(message, mandatory=mandatory, hide=hide,
                         input_func=reader, password_func=hidden)

    creds = resolve_credentials(ask=ask)
    assert creds.login == "98765432100"
    assert creds.password == "pw"


def test_resolve_credentials_supplied():
    def ask(*args, **kwargs):
        raise AssertionError("should not prompt")

    creds = resolve_credentials("111", "secret", ask=ask)
    assert creds.login == "111"
    assert "secret" not in repr(creds)


if __name__ == '__main__':
    print("=== Prompts & Credentials Test ===\n")
    sys.exit(pytest.main([__file__, "-v"]))
