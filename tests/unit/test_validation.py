from unittest.mock import Mock

from cellextension.config import GameSettings
from cellextension.utils.validation import (
    print_validation_errors,
    validate_evaluation_config,
    validate_settings,
)


class TestValidateSettings:

    def test_valid_settings(self):
        for size in (4, 6, 10):
            assert validate_settings(GameSettings(board_size=size, ai_difficulty="hard")) == []
        assert validate_settings(GameSettings(board_size=16)) == []

    def test_unsupported_board_size(self):
        errors = validate_settings(GameSettings(board_size=5))
        assert len(errors) == 1
        assert "Invalid board size: 5" in errors[0]

    def test_hard_ai_on_large_board(self):
        errors = validate_settings(GameSettings(board_size=16, ai_difficulty="hard"))
        assert len(errors) == 1
        assert "Hard AI" in errors[0]

    def test_fields_changed_after_construction(self):
        settings = GameSettings()
        settings.first_player = "robot"
        settings.player_mode = "spectator"
        errors = validate_settings(settings)
        assert len(errors) == 2


class TestValidateEvaluationConfig:

    def test_valid(self):
        assert validate_evaluation_config(20, 4) == []

    def test_invalid(self):
        errors = validate_evaluation_config(0, 40)
        assert len(errors) == 2


class TestPrintValidationErrors:

    def test_logs_each_error(self):
        logger = Mock()
        print_validation_errors(["first", "second"], logger)
        messages = [call.args[0] for call in logger.error.call_args_list]
        assert "first" in messages
        assert "second" in messages

    def test_no_errors_logs_nothing(self):
        logger = Mock()
        print_validation_errors([], logger)
        logger.error.assert_not_called()
