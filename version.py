"""
keeps the package version file in sync with `git describe` when building from a checkout

"""

from __future__ import annotations

import importlib.util
import os
import re
import subprocess

MAJOR_MINOR_PATCH_MATCHER = re.compile(r"^v?(\d+\.\d+\.\d+)$")


def pep440ify(git_describe_version: str) -> str:
    """1.2.3 -> 1.2.3, 1.2.3-4-gabcdef -> 1.2.3+gabcdef, abcdef -> 0.0.0+abcdef"""
    exact = MAJOR_MINOR_PATCH_MATCHER.match(git_describe_version)
    if exact:
        return exact.group(1)
    parts = git_describe_version.rsplit("-", 2)
    if len(parts) == 3:
        tag, _commits, sha = parts
        return f"{tag.lstrip('v')}+{sha}"
    return f"0.0.0+{git_describe_version}"


def _read_file_version(version_file: str) -> str | None:
    spec = importlib.util.spec_from_file_location("version", version_file)
    if spec is None or spec.loader is None:
        return None
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except OSError:
        return None
    return getattr(module, "__version__", None)


def _git_describe() -> str | None:
    try:
        proc = subprocess.run(["git", "describe", "--tags", "--always"], capture_output=True, check=False)
    except OSError:
        return None
    if proc.returncode != 0 or not proc.stdout:
        return None
    return proc.stdout.splitlines()[0].strip().decode("utf-8")


def get_project_version(version_file: str) -> str:
    version_file = os.path.join(os.path.dirname(os.path.realpath(__file__)), version_file)
    file_ver = _read_file_version(version_file)

    git_ver = _git_describe()
    if git_ver:
        git_ver = pep440ify(git_ver)
        if git_ver != file_ver:
            with open(version_file, "w", encoding="utf-8") as fp:
                fp.write("__version__ = '%s'\n" % git_ver)
        return git_ver

    if not file_ver:
        raise Exception("version not available from git or from file %r" % version_file)

    return file_ver


if __name__ == "__main__":
    import sys

    print(get_project_version(sys.argv[1]))
