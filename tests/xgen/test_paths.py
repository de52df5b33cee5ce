"""Tests for paths.py: relative_path() and bundle_path()."""

from pathlib import Path, PurePosixPath, PureWindowsPath

import pytest

from xgen.errors import InvalidPathError
from xgen.paths import bundle_path, relative_path


class TestRelativePath:
    def test_child(self) -> None:
        assert relative_path("/a/b", "/a/b/c/d") == "c/d"

    def test_sibling(self) -> None:
        assert relative_path("/work/Demo.xcworkspace", "/work/App/App.xcodeproj") == (
            "../App/App.xcodeproj"
        )

    def test_ascends_multiple_levels(self) -> None:
        assert relative_path("/a/b/c", "/a/x") == "../../x"

    def test_up_to_root(self) -> None:
        assert relative_path("/a/b", "/z") == "../../z"

    def test_same_path(self) -> None:
        assert relative_path("/a/b", "/a/b") == "."

    def test_no_leading_separator(self) -> None:
        assert not relative_path("/", "/etc/hosts").startswith("/")

    def test_normalizes_string_inputs(self) -> None:
        assert relative_path("/a/b/../b/", "/a/./c/") == "../c"

    def test_normalizes_path_objects(self) -> None:
        assert relative_path(PurePosixPath("/a/b/.."), PurePosixPath("/a/c")) == "c"
        assert relative_path(PurePosixPath("/a/./b"), PurePosixPath("/a/b/c/../d")) == "d"

    def test_normalizes_windows_path_objects(self) -> None:
        base = PureWindowsPath("C:/Work/Demo.xcworkspace/..")
        target = PureWindowsPath("C:/Work/App/App.xcodeproj")
        assert relative_path(base, target) == "App/App.xcodeproj"

    def test_accepts_path_objects(self, tmp_path: Path) -> None:
        assert relative_path(tmp_path, tmp_path / "x" / "y") == "x/y"

    def test_windows_paths_use_forward_slashes(self) -> None:
        base = PureWindowsPath("C:/Work/Demo.xcworkspace")
        target = PureWindowsPath("C:/Work/App/App.xcodeproj")
        assert relative_path(base, target) == "../App/App.xcodeproj"

    def test_different_drives_raise(self) -> None:
        with pytest.raises(InvalidPathError, match="common root"):
            relative_path(PureWindowsPath("C:/Work"), PureWindowsPath("D:/App"))

    def test_relative_base_raises(self) -> None:
        with pytest.raises(InvalidPathError, match="base path"):
            relative_path("work", "/app")

    def test_relative_target_raises(self) -> None:
        with pytest.raises(InvalidPathError, match="target path"):
            relative_path(PurePosixPath("/work"), PurePosixPath("app"))

    def test_error_carries_paths(self) -> None:
        with pytest.raises(InvalidPathError) as exc_info:
            relative_path("work", "/app")
        assert exc_info.value.base == "work"
        assert exc_info.value.target == "/app"


class TestBundlePath:
    def test_appends_extension(self) -> None:
        assert bundle_path("out/Demo", ".playground") == Path("out/Demo.playground")

    def test_keeps_existing_extension(self) -> None:
        assert bundle_path("out/Demo.playground", ".playground") == Path(
            "out/Demo.playground"
        )

    def test_appends_after_other_suffix(self) -> None:
        assert bundle_path("out/v1.2", ".xcworkspace") == Path("out/v1.2.xcworkspace")
