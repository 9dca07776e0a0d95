"""Unit tests for Rich formatting helpers."""

from explorefs.models.items import FileSystemItem
from explorefs.utils.formatting import format_entry_row
from rich.text import Text


class TestFormatEntryRow:
    """Tests for format_entry_row."""

    def test_directory_row(self) -> None:
        icon, name, path = format_entry_row(FileSystemItem("DCIM", "adb://S1/sdcard/DCIM", True))

        assert Text.from_markup(name).plain == "DCIM/"
        assert Text.from_markup(path).plain == "adb://S1/sdcard/DCIM"

    def test_markup_in_names_is_literal(self) -> None:
        """Brackets in file names survive markup rendering unchanged."""
        item = FileSystemItem("[b]name", "/tmp/[/x]/[b]name", False)

        _, name, path = format_entry_row(item)

        assert Text.from_markup(name).plain == "[b]name"
        assert Text.from_markup(path).plain == "/tmp/[/x]/[b]name"
