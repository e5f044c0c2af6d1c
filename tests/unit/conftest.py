import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


def write_executable(path: Path, body: str) -> Path:
    """Write a Python script run by the current interpreter and mark it executable."""
    path.write_text(f"#!{sys.executable}\n{body}")
    path.chmod(0o755)
    return path


@pytest.fixture
def make_script(tmp_path):
    """Factory for throwaway sidecar stand-ins."""
    def _make(name: str, body: str) -> Path:
        return write_executable(tmp_path / name, body)
    return _make


@pytest.fixture
def sidecar_script(make_script):
    """The real transform utility wrapped in an executable file."""
    return make_script(
        "sidecar",
        "import sys\n"
        f"sys.path.insert(0, {str(SRC_DIR)!r})\n"
        "from sidecar_encoder.cli.sidecar import main\n"
        "sys.exit(main())\n",
    )
