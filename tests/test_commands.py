"""Tests for sub-command selection"""
import pytest

from optclaim.core.config import ParserSetting
from optclaim.core.exceptions import DeclarationError, NoInputError, UnrecognizedCommandError
from optclaim.parsing.commands import Command, CommandParser
from optclaim.parsing.options import FlagOption
from optclaim.parsing.parser import OptionParser

EXPECTED_USAGE = (
    "usage: prog <command> [options]\n"
    "\n"
    "available commands:\n"
    "  build   compile the project\n"
    "  test    run the tests\n"
)


@pytest.fixture
def calls():
    return []


@pytest.fixture
def commands(calls):
    return [
        Command("build", "compile the project", lambda: calls.append("build") or "built"),
        Command("test", "run the tests", lambda: calls.append("test")),
        Command("debug", None, lambda: calls.append("debug")),
    ]


@pytest.fixture
def make_command_parser(environment, commands):
    def _make(settings=(ParserSetting.THROWS_ERRORS,), **kwargs):
        return CommandParser(*commands, settings=settings, environment=environment, **kwargs)

    return _make


class TestCommandSelection:
    """Test picking a command by value"""

    def test_selects_command(self, make_command_parser, calls):
        parser = make_command_parser()
        command = parser.parse(["prog", "build", "--release"])
        assert command.value == "build"
        assert parser.parsed_command is command
        assert command.call() == "built"
        assert calls == ["build"]

    def test_undocumented_command_is_selectable(self, make_command_parser):
        assert make_command_parser().parse(["prog", "debug"]).value == "debug"

    def test_custom_index(self, make_command_parser):
        parser = make_command_parser()
        assert parser.parse(["tool", "--quiet", "test"], index=2).value == "test"

    def test_reads_environment_arguments(self, environment):
        parser = CommandParser(
            Command("--from-argv", None, lambda: None),
            settings=[ParserSetting.THROWS_ERRORS],
            environment=environment,
        )
        assert parser.parse().value == "--from-argv"

    def test_unrecognized_command(self, make_command_parser):
        parser = make_command_parser()
        with pytest.raises(UnrecognizedCommandError, match="unrecognized command 'deploy'") as exc_info:
            parser.parse(["prog", "deploy"])
        assert exc_info.value.argument == "deploy"
        assert parser.parsed_command is None

    def test_no_input(self, make_command_parser):
        with pytest.raises(NoInputError):
            make_command_parser().parse(["prog"])

    def test_command_then_options(self, make_command_parser, environment):
        """The chosen command parses its own options past the command token"""
        verbose = FlagOption("v")
        options = OptionParser(verbose, help_name="build", settings=[ParserSetting.THROWS_ERRORS], environment=environment)
        arguments = ["prog", "build", "-v"]

        command = make_command_parser().parse(arguments)
        options.parse(arguments, from_index=2)

        assert command.value == "build"
        assert verbose.value is True


class TestCommandUsage:
    """Test the command listing"""

    def test_usage(self, make_command_parser):
        assert make_command_parser().usage() == EXPECTED_USAGE

    def test_usage_with_error_message(self, make_command_parser):
        text = make_command_parser().usage("something went wrong")
        assert text.startswith("something went wrong\nusage: prog")

    def test_multi_line_invocation(self, make_command_parser):
        text = make_command_parser(invocation="build [-v]\ntest [-k NAME]").usage()
        assert text.splitlines()[:2] == ["usage: prog build [-v]", "            test [-k NAME]"]


class TestHelpAndVersion:
    """Help and version requests answer on stdout and exit 0"""

    def test_help_argument(self, make_command_parser, environment):
        parser = make_command_parser(help_argument="help")
        with pytest.raises(SystemExit) as exc_info:
            parser.parse(["prog", "help"])
        assert exc_info.value.code == 0
        assert environment.stdout.getvalue() == EXPECTED_USAGE + "\n"
        assert environment.stderr.getvalue() == ""

    def test_version_argument(self, make_command_parser, environment):
        parser = make_command_parser(version_argument="--version", version="2.0.1")
        with pytest.raises(SystemExit) as exc_info:
            parser.parse(["prog", "--version"])
        assert exc_info.value.code == 0
        assert environment.stdout.getvalue() == "2.0.1\n"

    def test_help_takes_precedence_over_commands(self, environment):
        parser = CommandParser(
            Command("help", "a command named help", lambda: None),
            help_argument="help",
            environment=environment,
        )
        with pytest.raises(SystemExit):
            parser.parse(["prog", "help"])
        assert parser.parsed_command is None


class TestCommandErrorReporting:
    """Without THROWS_ERRORS failures are printed and the process exits"""

    def test_unrecognized_command_reported(self, make_command_parser, environment):
        parser = make_command_parser(settings=())
        with pytest.raises(SystemExit) as exc_info:
            parser.parse(["prog", "deploy"])
        assert exc_info.value.code == 1
        assert environment.stderr.getvalue() == "unrecognized command 'deploy'\n" + EXPECTED_USAGE + "\n"

    def test_no_input_prints_only_usage(self, make_command_parser, environment):
        parser = make_command_parser(settings=())
        with pytest.raises(SystemExit):
            parser.parse(["prog"])
        assert environment.stderr.getvalue() == EXPECTED_USAGE + "\n"

    def test_terminate_that_returns(self, make_command_parser, environment):
        statuses = []
        environment.terminate = statuses.append
        parser = make_command_parser(settings=())
        assert parser.parse(["prog", "deploy"]) is None
        assert statuses == [1]


class TestCommandDeclaration:
    """Declaration-time validation"""

    def test_duplicate_command_value(self):
        with pytest.raises(DeclarationError, match="non-unique command value 'build'"):
            CommandParser(Command("build", None, lambda: None), Command("build", "again", lambda: None))

    def test_version_argument_requires_version(self):
        with pytest.raises(DeclarationError):
            CommandParser(version_argument="--version")
