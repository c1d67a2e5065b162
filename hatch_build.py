"""Hatchling build hook that embeds git commit info in the package."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO = "totepad/_build_info.py"


class CustomBuildHook(BuildHookInterface):
    """Writes totepad/_build_info.py so installed copies can report their commit."""

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        root = Path(self.root)
        commit = self._git(root, "rev-parse", "HEAD")
        date = self._git(root, "show", "-s", "--format=%cI", "HEAD")
        (root / BUILD_INFO).write_text(
            "# Auto-generated at build time.\n"
            f"COMMIT = {commit!r}\n"
            f"DATE = {date!r}\n",
            encoding="utf-8",
        )
        # Generated file is git-ignored, so it has to be force-included
        build_data.setdefault("artifacts", []).append(BUILD_INFO)

    @staticmethod
    def _git(cwd: Path, *args: str) -> str | None:
        try:
            out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
        except (subprocess.CalledProcessError, OSError):
            # Builds from an sdist have no git metadata
            return None
        return out.decode().strip() or None
