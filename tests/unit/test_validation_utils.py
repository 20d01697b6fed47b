"""Unit tests for input validation utilities.

Tests filename validation, file size checks and board URL checks used at the
/process request boundary. All tests are pure unit tests with no network or AI
dependencies.
"""

import pytest

from app.config import Settings
from app.exceptions import InputValidationError
from app.utils.validation import validate_filename, validate_file_size, validate_miro_url


@pytest.fixture
def settings():
    return Settings(max_file_size_mb=1, max_filename_length=20)


class TestValidateFilename:
    def test_valid_filename_passes(self, settings):
        assert validate_filename("report.txt", settings) == "report.txt"

    def test_null_bytes_removed(self, settings):
        assert validate_filename("rep\x00ort.md", settings) == "report.md"

    @pytest.mark.parametrize("name", ["../etc/passwd", "dir/file.txt", "..hidden"])
    def test_path_traversal_blocked(self, settings, name):
        with pytest.raises(InputValidationError) as exc_info:
            validate_filename(name, settings)
        assert exc_info.value.error_code == "INVALID_FILENAME"

    def test_forbidden_characters(self, settings):
        with pytest.raises(InputValidationError):
            validate_filename("what?.txt", settings)

    def test_too_long(self, settings):
        with pytest.raises(InputValidationError) as exc_info:
            validate_filename("a" * 30 + ".txt", settings)
        assert exc_info.value.details["length"] == 34

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty(self, settings, name):
        with pytest.raises(InputValidationError):
            validate_filename(name, settings)


class TestValidateFileSize:
    def test_within_limit(self, settings):
        validate_file_size(1024 * 1024, settings)

    def test_over_limit(self, settings):
        with pytest.raises(InputValidationError) as exc_info:
            validate_file_size(1024 * 1024 + 1, settings)

        err = exc_info.value
        assert err.error_code == "FILE_TOO_LARGE"
        assert err.message == "File size exceeds 1MB limit"
        assert err.details["max_size_bytes"] == 1024 * 1024


class TestValidateMiroUrl:
    def test_trimmed(self):
        assert validate_miro_url("  https://miro.com/app/board/abc=/ ") == "https://miro.com/app/board/abc=/"

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_blank_rejected(self, value):
        with pytest.raises(InputValidationError) as exc_info:
            validate_miro_url(value)
        assert exc_info.value.error_code == "INVALID_MIRO_URL"
