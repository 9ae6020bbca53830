from tasklauncher.arguments import build_arguments, quote_token
from tasklauncher.models import ActionSpec


def test_args_list_quotes_only_tokens_with_spaces():
    spec = ActionSpec(args_list=("--port", "8080", "--mode", "safe value with spaces"))
    assert build_arguments(spec) == '--port 8080 --mode "safe value with spaces"'


def test_embedded_quote_is_escaped_and_token_wrapped():
    spec = ActionSpec(args_list=('say"hi',))
    assert build_arguments(spec) == '"say\\"hi"'


def test_empty_token_renders_as_empty_quotes():
    spec = ActionSpec(args_list=("a", "", "b"))
    assert build_arguments(spec) == 'a "" b'


def test_tab_counts_as_whitespace():
    assert quote_token("a\tb") == '"a\tb"'


def test_args_list_wins_over_args_text():
    spec = ActionSpec(args_text="--ignored", args_list=("--used",))
    assert build_arguments(spec) == "--used"


def test_empty_args_list_falls_back_to_text():
    spec = ActionSpec(args_text="  --flag1 value --toggle  ", args_list=())
    assert build_arguments(spec) == "--flag1 value --toggle"


def test_args_text_is_passed_verbatim():
    spec = ActionSpec(args_text='-x "already quoted" \\"odd')
    assert build_arguments(spec) == '-x "already quoted" \\"odd'


def test_no_arguments_gives_empty_string():
    assert build_arguments(ActionSpec()) == ""


def test_build_is_deterministic():
    spec = ActionSpec(args_list=("one two", "three"))
    assert build_arguments(spec) == build_arguments(spec)
