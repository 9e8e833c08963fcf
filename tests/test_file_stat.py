"""Tests de l'adapter OSFileStat et des erreurs structurées."""

import os
from pathlib import Path

import pytest

from filestamp.core.errors import FileStatError, IOErrorKind
from filestamp.domain.timestamp import Timestamp
from filestamp.infra.system import file_stat as file_stat_module
from filestamp.infra.system.file_stat import OSFileStat


class _BadPath:
    def __fspath__(self):
        return 42


class _FakeStat:
    def __init__(self, st_mtime_ns):
        self.st_mtime_ns = st_mtime_ns


class TestOSFileStat:

    def setup_method(self):
        self.adapter = OSFileStat()

    def test_matches_os_stat(self, sample_file):
        ts = self.adapter.modified_time(str(sample_file))
        assert ts.to_ns() == os.stat(sample_file).st_mtime_ns

    def test_accepts_pathlike(self, sample_file):
        assert self.adapter.modified_time(Path(sample_file)) == self.adapter.modified_time(str(sample_file))

    def test_directory_is_not_special_cased(self, tmp_path):
        ts = self.adapter.modified_time(str(tmp_path))
        assert ts.to_ns() == os.stat(tmp_path).st_mtime_ns

    def test_missing_path(self, tmp_path):
        missing = str(tmp_path / "absent.txt")
        with pytest.raises(FileStatError) as exc_info:
            self.adapter.modified_time(missing)
        err = exc_info.value
        assert err.kind == IOErrorKind.NOT_FOUND
        assert err.path == missing
        assert str(err)

    def test_empty_path(self):
        with pytest.raises(FileStatError) as exc_info:
            self.adapter.modified_time("")
        assert exc_info.value.kind == IOErrorKind.NOT_FOUND

    def test_nul_byte_is_invalid_input(self):
        with pytest.raises(FileStatError) as exc_info:
            self.adapter.modified_time("a\x00b")
        assert exc_info.value.kind == IOErrorKind.INVALID_INPUT
        assert "NUL" in str(exc_info.value)

    @pytest.mark.parametrize("value", [0, 3, None, 1.5])
    def test_non_path_input_is_rejected(self, value):
        with pytest.raises(FileStatError) as exc_info:
            self.adapter.modified_time(value)
        assert exc_info.value.kind == IOErrorKind.INVALID_INPUT

    def test_pathlike_returning_non_path_is_rejected(self):
        with pytest.raises(FileStatError) as exc_info:
            self.adapter.modified_time(_BadPath())
        assert exc_info.value.kind == IOErrorKind.INVALID_INPUT

    def test_other_value_error_keeps_its_description(self, monkeypatch):
        def fake_stat(path, *args, **kwargs):
            raise ValueError("path too long for Windows")

        monkeypatch.setattr(file_stat_module.os, "stat", fake_stat)
        with pytest.raises(FileStatError) as exc_info:
            self.adapter.modified_time("C:\\tres\\long")
        assert exc_info.value.kind == IOErrorKind.INVALID_INPUT
        assert str(exc_info.value) == "path too long for Windows"

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks non supportés")
    def test_dangling_symlink_is_not_found(self, tmp_path):
        link = tmp_path / "lien"
        try:
            os.symlink(tmp_path / "cible-absente", link)
        except OSError:
            pytest.skip("création de symlink refusée")
        with pytest.raises(FileStatError) as exc_info:
            self.adapter.modified_time(str(link))
        assert exc_info.value.kind == IOErrorKind.NOT_FOUND

    def test_pre_epoch_mtime_is_an_error(self, sample_file, monkeypatch):
        real_stat = os.stat
        target = str(sample_file)

        def fake_stat(path, *args, **kwargs):
            if path == target:
                return _FakeStat(-1_000_000_000)
            return real_stat(path, *args, **kwargs)

        monkeypatch.setattr(file_stat_module.os, "stat", fake_stat)
        with pytest.raises(FileStatError) as exc_info:
            self.adapter.modified_time(target)
        assert exc_info.value.kind == IOErrorKind.UNSUPPORTED

    def test_epoch_mtime_is_valid(self, sample_file):
        os.utime(sample_file, ns=(0, 0))
        assert self.adapter.modified_time(str(sample_file)) == Timestamp(0, 0)

    def test_permission_error_is_mapped(self, monkeypatch):
        def fake_stat(path, *args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(file_stat_module.os, "stat", fake_stat)
        with pytest.raises(FileStatError) as exc_info:
            self.adapter.modified_time("/secret/file")
        err = exc_info.value
        assert err.kind == IOErrorKind.PERMISSION_DENIED
        assert err.os_error == 13
        assert str(err) == "Permission denied (os error 13)"


class TestFileStatError:

    def test_from_os_error_formats_like_host(self):
        err = FileStatError.from_os_error(FileNotFoundError(2, "No such file or directory"), path="x")
        assert err.kind == IOErrorKind.NOT_FOUND
        assert err.os_error == 2
        assert str(err) == "No such file or directory (os error 2)"

    def test_not_a_directory_maps_to_not_found(self):
        err = FileStatError.from_os_error(NotADirectoryError(20, "Not a directory"))
        assert err.kind == IOErrorKind.NOT_FOUND

    def test_other_os_error_without_errno(self):
        err = FileStatError.from_os_error(OSError("périphérique indisponible"))
        assert err.kind == IOErrorKind.OTHER
        assert err.os_error is None
        assert str(err) == "périphérique indisponible"
