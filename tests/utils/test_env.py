import os
from pathlib import Path
from unittest.mock import patch

from utils.env import _find_project_root, load_project_dotenv

# --- Test _find_project_root --- #


def test_find_project_root_found_in_start(tmp_path: Path):
    """Test finding pyproject.toml in the starting directory."""
    start_dir = tmp_path / "subdir"
    start_dir.mkdir()
    (start_dir / "pyproject.toml").touch()

    assert _find_project_root(start=start_dir) == start_dir


def test_find_project_root_found_multiple_levels_up(tmp_path: Path):
    """Test finding pyproject.toml multiple levels up."""
    project_root = tmp_path / "level1"
    project_root.mkdir()
    (project_root / "pyproject.toml").touch()

    start_dir = project_root / "subdir1" / "subdir2" / "subdir3"
    start_dir.mkdir(parents=True)

    assert _find_project_root(start=start_dir) == project_root


# --- Test load_project_dotenv --- #


# We patch load_dotenv where it's imported in the utils.env module
@patch("utils.env.load_dotenv")
@patch("utils.env._find_project_root")
def test_load_dotenv_called_when_env_file_exists(mock_find_root, mock_load_dotenv, tmp_path: Path):
    env_file = tmp_path / ".env"
    env_file.touch()
    mock_find_root.return_value = tmp_path

    assert load_project_dotenv() is True

    mock_find_root.assert_called_once()
    mock_load_dotenv.assert_called_once_with(dotenv_path=env_file, override=False)


@patch("utils.env.load_dotenv")
@patch("utils.env._find_project_root")
def test_load_dotenv_skipped_when_env_file_missing(mock_find_root, mock_load_dotenv, tmp_path: Path):
    mock_find_root.return_value = tmp_path

    assert load_project_dotenv() is False

    mock_load_dotenv.assert_not_called()


@patch("utils.env._find_project_root")
def test_load_dotenv_does_not_override_existing(mock_find_root, tmp_path: Path, monkeypatch):
    """Existing environment variables win over the .env file (override=False)."""
    (tmp_path / ".env").write_text("CUSTOMER_DATASET_SIZE=999\nCUSTOMER_DATASET_SEED=7")
    mock_find_root.return_value = tmp_path
    monkeypatch.setenv("CUSTOMER_DATASET_SIZE", "25")
    monkeypatch.delenv("CUSTOMER_DATASET_SEED", raising=False)

    load_project_dotenv()

    assert os.environ.get("CUSTOMER_DATASET_SIZE") == "25"
    assert os.environ.get("CUSTOMER_DATASET_SEED") == "7"
