import pytest

from frame_console.tokenizer import Tokens, tokenize


@pytest.mark.parametrize(
    "line,expected",
    [
        ("log hello 2", ["log", "hello", "2"]),
        ("  log   hello\t2  ", ["log", "hello", "2"]),
        ('say "hello world" \'a b\'', ["say", "hello world", "a b"]),
        ("say hello\\ world", ["say", "hello world"]),
        ('say "a \\"quoted\\" word"', ["say", 'a "quoted" word']),
        ("say #tag", ["say", "#tag"]),
        ('say ""', ["say", ""]),
    ],
)
def test_tokenize_splits_with_shell_quoting(line: str, expected: list[str]) -> None:
    assert list(tokenize(line)) == expected


@pytest.mark.parametrize("line", ["", "   ", "\t \t"])
def test_tokenize_blank_line_yields_nothing(line: str) -> None:
    assert list(tokenize(line)) == []


@pytest.mark.parametrize(
    "line,expected",
    [
        ('say "unterminated', ["say"]),
        ("say 'it", ["say"]),
        ("echo abc\\", ["echo"]),
        ('"never closed', []),
    ],
)
def test_tokenize_malformed_quoting_keeps_complete_tokens(
    line: str, expected: list[str]
) -> None:
    assert list(tokenize(line)) == expected


def test_tokens_are_restartable() -> None:
    tokens = tokenize('set name "some value"')
    assert isinstance(tokens, Tokens)
    first = list(tokens)
    second = list(tokens)
    assert first == second == ["set", "name", "some value"]


def test_tokens_are_lazy() -> None:
    tokens = iter(tokenize("a b c"))
    assert next(tokens) == "a"
    assert next(tokens) == "b"
