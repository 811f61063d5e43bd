"""Optional dependencies tests."""

import sys
from collections.abc import Generator
from typing import Any

import pytest

from olcodec.__main__ import main


@pytest.fixture  # type: ignore[misc]
def optional_packages() -> list[str]:
    """Get a list with optional packages."""
    return [
        "typer",
        "click",
        "rich",
    ]


@pytest.fixture(autouse=True)  # type: ignore[misc]
def cleanup_imports() -> Generator[Any, Any, Any]:
    """Clean imports."""
    sys.modules.pop("olcodec.cli", None)
    sys.modules["olcodec"].__dict__.pop("cli", None)
    yield
    sys.modules.pop("olcodec.cli", None)
    sys.modules["olcodec"].__dict__.pop("cli", None)


class PackageDiscarder:
    """Mock class for discarding list of packages."""

    def __init__(self) -> None:
        """Init mock class."""
        self.pkgnames: list[str] = []

    def find_spec(self, fullname, path, target=None) -> None:  # type: ignore
        """Throws ImportError if matching module."""
        if fullname.split(".")[0] in self.pkgnames:
            raise ImportError(name=fullname)


@pytest.fixture  # type: ignore[misc]
def no_optional_dependencies(monkeypatch: Any, optional_packages: Any) -> Generator[Any, Any, Any]:
    """Mock environment without optional dependencies."""
    d = PackageDiscarder()

    for package in optional_packages:
        for module_name in [name for name in sys.modules if name.split(".")[0] == package]:
            monkeypatch.delitem(sys.modules, module_name)
        d.pkgnames.append(package)
    sys.meta_path.insert(0, d)
    yield
    sys.meta_path.remove(d)


@pytest.mark.usefixtures("no_optional_dependencies")  # type: ignore
def test_main_missing_imports() -> None:
    """Test if missing import error is raised."""
    with pytest.raises(ImportError, match=r"pip install olcodec\[cli\]"):
        main()
