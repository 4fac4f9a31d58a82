from barstatus.components.run_command import run_command


def test_run_command_echo():
    assert run_command("echo foo") == "foo"


def test_run_command_first_line_only():
    assert run_command("printf 'a\\nb\\n'") == "a"


def test_run_command_no_output():
    assert run_command("printf ''") is None


def test_run_command_exit_status_ignored():
    assert run_command("echo out; exit 3") == "out"


def test_run_command_long_output_truncated():
    result = run_command("head -c 3000 /dev/zero | tr '\\0' x")
    assert set(result) == {"x"}
    assert len(result) == 1022