import pytest

from pypipex.cmdsplit import split_command


def test_plain_words():
    assert split_command("ls -l") == ["ls", "-l"]


def test_single_quoted_word_keeps_spaces():
    assert split_command("grep 'hello world'") == ["grep", "hello world"]


def test_double_quoted_word_keeps_spaces():
    assert split_command('awk "{print $1}"') == ["awk", "{print $1}"]


def test_mixed_blanks_separate_words():
    assert split_command("  wc\t-l\n ") == ["wc", "-l"]


@pytest.mark.parametrize("cmd", ["", "   ", "\t\n "])
def test_blank_input_gives_no_words(cmd):
    assert split_command(cmd) == []


def test_unterminated_quote_runs_to_end():
    assert split_command("echo 'abc def") == ["echo", "abc def"]


def test_text_after_closing_quote_is_a_new_word():
    assert split_command("'a b'c") == ["a b", "c"]


def test_quote_inside_unquoted_word_is_kept():
    assert split_command("echo it's") == ["echo", "it's"]


def test_empty_quotes_give_empty_word():
    assert split_command("printf ''") == ["printf", ""]


def test_other_quote_kind_inside_quotes_is_literal():
    assert split_command("echo \"it's here\"") == ["echo", "it's here"]


@pytest.mark.parametrize(
    "words",
    [["cat"], ["tr", "a-z", "A-Z"], ["sort", "-r", "-n", "-k2"]],
)
def test_simple_words_round_trip(words):
    assert split_command(" ".join(words)) == words