"""Unit tests for directory fingerprints and ChangeDetector."""

from pathlib import Path

from explorefs.core.fingerprint import NO_FINGERPRINT, ChangeDetector, fingerprint


class TestFingerprint:
    """Tests for fingerprint()."""

    def test_stable_without_changes(self, sample_tree: Path) -> None:
        """Two calls on an unchanged directory agree."""
        assert fingerprint(str(sample_tree)) == fingerprint(str(sample_tree))

    def test_new_file_changes_it(self, sample_tree: Path) -> None:
        """Adding a file changes the fingerprint."""
        before = fingerprint(str(sample_tree))
        (sample_tree / "new.txt").write_text("n")

        assert fingerprint(str(sample_tree)) != before

    def test_size_change_changes_it(self, sample_tree: Path) -> None:
        """Growing a file changes the fingerprint."""
        before = fingerprint(str(sample_tree))
        (sample_tree / "x.txt").write_bytes(b"abcd")

        assert fingerprint(str(sample_tree)) != before

    def test_device_path_is_sentinel(self) -> None:
        """Device paths always return the sentinel."""
        assert fingerprint("adb://S1/sdcard") == NO_FINGERPRINT
        assert fingerprint("device://S1/sdcard", scheme="device") == NO_FINGERPRINT

    def test_missing_or_file_is_sentinel(self, sample_tree: Path) -> None:
        """Non-directories return the sentinel."""
        assert fingerprint(str(sample_tree / "nope")) == NO_FINGERPRINT
        assert fingerprint(str(sample_tree / "x.txt")) == NO_FINGERPRINT

    def test_fits_in_64_bits(self, sample_tree: Path) -> None:
        """Fingerprints are non-negative 64-bit integers."""
        value = fingerprint(str(sample_tree))

        assert 0 <= value < 2**64


class TestChangeDetector:
    """Tests for ChangeDetector."""

    def test_first_call_is_baseline(self, sample_tree: Path) -> None:
        """The first poll never reports a change."""
        assert ChangeDetector().has_changed(str(sample_tree)) is False

    def test_reports_change_once(self, sample_tree: Path) -> None:
        """A change is reported on the next poll, then settles."""
        detector = ChangeDetector()
        detector.has_changed(str(sample_tree))
        (sample_tree / "new.txt").write_text("n")

        assert detector.has_changed(str(sample_tree)) is True
        assert detector.has_changed(str(sample_tree)) is False

    def test_forget_resets_baseline(self, sample_tree: Path) -> None:
        """After forget() the next poll is a fresh baseline."""
        detector = ChangeDetector()
        detector.has_changed(str(sample_tree))
        (sample_tree / "new.txt").write_text("n")
        detector.forget(str(sample_tree))

        assert detector.has_changed(str(sample_tree)) is False
