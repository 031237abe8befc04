import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import cast

from typing_extensions import NotRequired, ReadOnly, Required, TypedDict

PYPROJECT_PATH = Path(__file__).parent.parent / "pyproject.toml"
DISTRIBUTION_NAME = "pytoolkit-optional"


class ProjectInfo(TypedDict):
    """[project]セクションのうち参照する項目の型定義"""

    name: ReadOnly[Required[str]]
    version: ReadOnly[NotRequired[str]]
    description: ReadOnly[NotRequired[str]]
    requires_python: ReadOnly[NotRequired[str]]
    dependencies: ReadOnly[NotRequired[list[str]]]
    optional_dependencies: ReadOnly[NotRequired[dict[str, list[str]]]]


class PyProjectToml(TypedDict, total=False):
    """pyproject.toml全体の型定義

    https://peps.python.org/pep-0621/
    """

    project: ReadOnly[Required[ProjectInfo]]


def get_package_metadata() -> PyProjectToml:
    """Return the package metadata.

    Reads pyproject.toml next to the package when running from a checkout,
    otherwise falls back to the installed distribution's metadata.
    """
    if PYPROJECT_PATH.exists():
        with PYPROJECT_PATH.open("rb") as f:
            return cast(PyProjectToml, tomllib.load(f))

    installed = importlib_metadata.metadata(DISTRIBUTION_NAME)
    return {
        "project": {
            "name": installed["Name"],
            "version": installed["Version"],
            "description": installed.get("Summary", ""),
        }
    }


METADATA = get_package_metadata()
NAME = METADATA["project"]["name"]
VERSION = METADATA["project"].get("version", "unknown")
