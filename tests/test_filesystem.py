"""
Tests for building trees from directories.
"""

import pytest

from canopy.io.filesystem import tree_from_directory


@pytest.fixture
def project_dir(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "empty").mkdir()
    src = tmp_path / "src"
    src.mkdir()
    (src / "util.py").write_text("")
    (src / "main.py").write_text("")
    git = tmp_path / ".git"
    git.mkdir()
    (git / "config").write_text("")
    return tmp_path


class TestTreeFromDirectory:
    """Tests for directory trees."""

    def test_layout_in_name_order(self, project_dir):
        tree = tree_from_directory(project_dir)

        expected = (
            f"{project_dir.name}\n"
            "├── a.txt\n"
            "├── empty\n"
            "└── src\n"
            "    ├── main.py\n"
            "    └── util.py"
        )
        assert tree.render() == expected

    def test_show_hidden(self, project_dir):
        lines = tree_from_directory(str(project_dir), show_hidden=True).render().split("\n")

        assert lines[1] == "├── .git"
        assert lines[2] == "│   └── config"

    def test_empty_directory(self, tmp_path):
        assert tree_from_directory(tmp_path).render() == tmp_path.name

    def test_missing_directory(self, tmp_path):
        with pytest.raises(OSError):
            tree_from_directory(tmp_path / "missing")
