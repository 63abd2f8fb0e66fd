"""
Tests for CLI entry point (streaks/main.py).

Validates argument parsing, command dispatch, and error handling.
"""

import json
from unittest.mock import Mock, patch

import pytest

from streaks.main import main
from streaks.core.models import StreaksConfig


class TestMainDispatch:
    """Test suite for command dispatch."""

    @pytest.mark.parametrize("argv,command_name,call_args", [
        (["display"], "DisplayCommand", ()),
        (["update"], "UpdateCommand", ()),
        (["hit", "gym", "reading"], "HitCommand", (["gym", "reading"],)),
        (["add", "gym"], "AddCommand", (["gym"],)),
        (["remove", "gym"], "RemoveCommand", (["gym"],)),
        (["rename", "gym", "workout"], "RenameCommand", ("gym", "workout")),
    ])
    def test_dispatch(self, argv, command_name, call_args, streaks_home):
        """Test that each subcommand reaches its command class."""
        mock_instance = Mock()
        mock_instance.run.return_value = True
        mock_class = Mock(return_value=mock_instance)

        with patch.dict("streaks.main.COMMANDS", {argv[0]: mock_class}):
            with patch("streaks.main.load_config", return_value=StreaksConfig()):
                result = main(argv)

        assert result == 0
        mock_class.assert_called_once()
        mock_instance.run.assert_called_once_with(*call_args)

    def test_no_command_shows_help(self, capsys):
        """Test that running without a command prints help and fails."""
        assert main([]) == 1
        assert "usage:" in capsys.readouterr().out

    def test_unknown_command_exits(self):
        """Test that argparse rejects unknown commands."""
        with pytest.raises(SystemExit) as exc_info:
            main(["explode"])
        assert exc_info.value.code == 2

    def test_rename_requires_two_names(self):
        """Test rename argument count."""
        with pytest.raises(SystemExit):
            main(["rename", "gym"])

    def test_command_failure_exit_code(self, streaks_home):
        """Test that a failing command returns 1."""
        mock_class = Mock(return_value=Mock(run=Mock(return_value=False)))

        with patch.dict("streaks.main.COMMANDS", {"update": mock_class}):
            assert main(["update"]) == 1

    def test_keyboard_interrupt(self, streaks_home):
        """Test that Ctrl-C exits with 130."""
        mock_class = Mock(return_value=Mock(run=Mock(side_effect=KeyboardInterrupt)))

        with patch.dict("streaks.main.COMMANDS", {"update": mock_class}):
            assert main(["update"]) == 130


class TestMainEndToEnd:
    """Run real commands against a temporary data directory."""

    def test_add_hit_display(self, streaks_home, capsys):
        """Test the add-then-hit scenario through the CLI."""
        assert main(["add", "reading"]) == 0
        assert main(["hit", "reading"]) == 0
        assert main(["display"]) == 0

        out = capsys.readouterr().out
        assert 'added streak "reading"' in out
        assert 'hit streak "reading": now at 1' in out
        assert "- reading: 1 (max 1) Done" in out
        assert (streaks_home / "state.txt").read_text().startswith("reading,1,1,")

    def test_state_file_flag(self, streaks_home, temp_dir, capsys):
        """Test --state-file overrides the default location."""
        custom = f"{temp_dir}/custom.txt"

        assert main(["--state-file", custom, "add", "gym"]) == 0

        assert "gym,0,0," in open(custom).read()
        assert not (streaks_home / "state.txt").exists()

    def test_config_state_path(self, streaks_home, temp_dir):
        """Test that the config file can move the state file."""
        config_path = f"{temp_dir}/config.json"
        state_path = f"{temp_dir}/from_config.txt"
        with open(config_path, "w") as handle:
            json.dump({"state_path": state_path}, handle)

        assert main(["--config", config_path, "add", "gym"]) == 0

        assert open(state_path).read().startswith("gym,")

    def test_corrupt_state_is_fatal(self, streaks_home, capsys):
        """Test that a corrupt state file aborts with an error."""
        streaks_home.mkdir(parents=True)
        (streaks_home / "state.txt").write_text("gym,1,1,not-a-date,Done")

        assert main(["hit", "gym"]) == 1

        err = capsys.readouterr().err
        assert "Error: failed to parse streak on line 1" in err
        assert (streaks_home / "state.txt").read_text() == "gym,1,1,not-a-date,Done"

    def test_invalid_config_is_fatal(self, streaks_home, temp_dir, capsys):
        """Test that a broken config aborts."""
        config_path = f"{temp_dir}/config.json"
        with open(config_path, "w") as handle:
            handle.write("{")

        assert main(["--config", config_path, "display"]) == 1
        assert "Invalid config file" in capsys.readouterr().err
