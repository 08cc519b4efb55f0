import tempfile
from pathlib import Path

import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def isolated_config_home(monkeypatch, tmp_path):
    """Keep a real user managepath.conf from leaking into tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("MANAGEPATH_DEBUG", raising=False)
    return home


@pytest.fixture
def temp_config_file():
    """Fixture for temporary config files."""
    temp_dir = tempfile.mkdtemp()
    config_path = Path(temp_dir) / "managepath.conf"
    yield config_path
    # Cleanup after test
    import shutil

    shutil.rmtree(temp_dir)


@pytest.fixture
def temp_config_with_content():
    """Fixture for temporary config files with given content."""
    temp_dir = tempfile.mkdtemp()

    def _create_config(content):
        config_path = Path(temp_dir) / "managepath.conf"
        with open(config_path, "w") as f:
            f.write(content)
        return config_path

    yield _create_config

    import shutil

    shutil.rmtree(temp_dir)


@pytest.fixture
def mock_config_file(mocker, temp_config_file):
    """Fixture that creates a config file and mocks find_config_file to return it."""

    def _setup_config(content):
        with open(temp_config_file, "w") as f:
            f.write(content)
        return mocker.patch(
            "managepath.config_manager.ConfigManager.find_config_file",
            return_value=temp_config_file,
        )

    return _setup_config


@pytest.fixture
def make_directory(tmp_path):
    """
    Fixture that builds a directory with the given files.

    Usage:
        def test_scan(make_directory):
            bin_dir = make_directory("bin", {"tool": 0o755, "readme.txt": 0o644})
            # or just names, created with mode 0o644
            other = make_directory("other", ["app.exe"])
    """

    def _make(name, files=(), subdirs=()):
        directory = tmp_path / name
        directory.mkdir(parents=True)
        modes = files if isinstance(files, dict) else {f: 0o644 for f in files}
        for file_name, mode in modes.items():
            file_path = directory / file_name
            file_path.touch()
            file_path.chmod(mode)
        for sub in subdirs:
            (directory / sub).mkdir()
        return directory

    return _make


@pytest.fixture
def missing_directory(tmp_path):
    """Path to a directory that does not exist."""
    return str(tmp_path / "does-not-exist")


@pytest.fixture
def path_env(monkeypatch):
    """
    Fixture to set the process PATH from a list of directories.

    Usage:
        def test_listing(path_env):
            path_env(["/usr/bin", "/bin"])
    """
    import os

    def _set(directories):
        value = os.pathsep.join(str(d) for d in directories)
        monkeypatch.setenv("PATH", value)
        return value

    return _set


@pytest.fixture
def xdg_config_scenarios(monkeypatch, temp_config_file):
    """
    Fixture for XDG configuration path testing scenarios.

    Usage:
        def test_xdg_config_scenarios(xdg_config_scenarios):
            config_path = xdg_config_scenarios["xdg_exists"]()
            assert ConfigManager.find_config_file() == config_path
    """

    def _xdg_exists():
        """Scenario: XDG_CONFIG_HOME exists with config file."""
        with open(temp_config_file, "w") as f:
            f.write("validate=true\n")

        monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_config_file.parent))
        monkeypatch.delenv("HOME", raising=False)
        return temp_config_file

    def _home_fallback():
        """Scenario: XDG_CONFIG_HOME missing, fallback to HOME/.config."""
        home_config_dir = temp_config_file.parent
        config_path = home_config_dir / ".config" / "managepath.conf"
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            f.write("validate=true\n")

        monkeypatch.setenv("XDG_CONFIG_HOME", "/nonexistent")
        monkeypatch.setenv("HOME", str(home_config_dir))
        return config_path

    def _no_config():
        """Scenario: No config file exists."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.delenv("HOME", raising=False)
        return None

    return {
        "xdg_exists": _xdg_exists,
        "home_fallback": _home_fallback,
        "no_config": _no_config,
    }


@pytest.fixture
def fake_winreg(mocker):
    """
    Replace the registry module with a mock that behaves like winreg.

    Value types use the winreg numbering (REG_SZ=1, REG_EXPAND_SZ=2) and
    ExpandEnvironmentStrings expands %SystemRoot% from the process
    environment.
    """
    import os

    fake = mocker.patch("managepath.environment_helper.winreg")
    fake.REG_SZ = 1
    fake.REG_EXPAND_SZ = 2
    fake.ExpandEnvironmentStrings.side_effect = lambda value: value.replace(
        "%SystemRoot%", os.environ.get("SystemRoot", "%SystemRoot%")
    )
    return fake
