"""End-to-end tests for the gc-tree CLI."""

import logging

import pytest
from generic_containers.cli.main import main

SAMPLE = """
[tree]
value = 5

[tree.left]
value = 6

[tree.right]
value = 7
"""


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.toml"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


def test_prints_inorder(sample_file, capsys):
    assert main([str(sample_file)]) == 0
    assert capsys.readouterr().out == "6 5 7\n"


def test_add_maps_values(sample_file, capsys):
    assert main([str(sample_file), "--add", "1"]) == 0
    assert capsys.readouterr().out == "7 6 8\n"


def test_scale_and_add(sample_file, capsys):
    assert main([str(sample_file), "--scale", "2", "--add", "0.5"]) == 0
    assert capsys.readouterr().out == "12.5 10.5 14.5\n"


@pytest.mark.parametrize(
    "order, expected",
    [("inorder", "6 5 7"), ("preorder", "5 6 7"), ("postorder", "6 7 5")],
)
def test_orders(sample_file, capsys, order, expected):
    assert main([str(sample_file), "--order", order]) == 0
    assert capsys.readouterr().out.strip() == expected


def test_render(sample_file, capsys):
    assert main([str(sample_file), "--render"]) == 0
    assert capsys.readouterr().out == "6 5 7\n 5\n/ \\\n6 7\n"


def test_order_from_file_options(tmp_path, capsys):
    path = tmp_path / "opts.toml"
    path.write_text('[options]\norder = "postorder"\n' + SAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "6 7 5\n"


def test_missing_file_exit_code(tmp_path, capsys):
    assert main([str(tmp_path / "missing.toml")]) == 2
    assert "Error loading tree" in capsys.readouterr().out


def test_non_numeric_values_cannot_be_scaled(tmp_path, capsys):
    path = tmp_path / "words.toml"
    path.write_text('[tree]\nvalue = "root"\n', encoding="utf-8")
    assert main([str(path), "--add", "1"]) == 2
    assert "Error transforming tree" in capsys.readouterr().out


def test_empty_tree(tmp_path, capsys):
    path = tmp_path / "empty.toml"
    path.write_text("", encoding="utf-8")
    assert main([str(path), "--render"]) == 0
    assert capsys.readouterr().out == "\n<empty>\n"


@pytest.fixture(autouse=True)
def restore_root_level():
    """main() sets the root logger level; put it back after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_verbose_logs_loading(sample_file, caplog):
    assert main([str(sample_file), "-v"]) == 0
    assert "Loaded tree with 3 nodes" in caplog.text


def test_quiet_by_default(sample_file, caplog):
    assert main([str(sample_file)]) == 0
    assert "Loaded tree" not in caplog.text


def test_file_log_level_applied(tmp_path):
    path = tmp_path / "info.toml"
    path.write_text('[options]\nlog_level = "info"\n' + SAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    assert logging.getLogger().level == logging.INFO


@pytest.mark.parametrize(
    "header",
    [
        '[options]\nlog_level = "loud"\n',  # unknown level
        '[options]\nrender = "false"\n',  # string instead of boolean
        "options = 5\n",  # not a table
    ],
)
def test_bad_options_exit_code(tmp_path, capsys, header):
    path = tmp_path / "bad.toml"
    path.write_text(header + SAMPLE, encoding="utf-8")
    assert main([str(path)]) == 2
    assert "Error loading tree" in capsys.readouterr().out


def test_directory_exit_code(tmp_path, capsys):
    assert main([str(tmp_path)]) == 2
    assert "Error loading tree" in capsys.readouterr().out
