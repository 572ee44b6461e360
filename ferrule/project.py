"""Generating rust-project.json so rust-analyzer understands the exercises."""

from __future__ import annotations

import glob
import json
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One exercise file treated as a stand-alone crate."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer look inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_json(self) -> str:
        data = {"sysroot_src": self.sysroot_src, "crates": [asdict(c) for c in self.crates]}
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    def write_to_disk(self) -> None:
        """Write rust-project.json into the current directory."""
        Path("./rust-project.json").write_text(self.to_json(), encoding="utf-8")

    def _path_to_json(self, path: str) -> None:
        _, dot, ext = path.partition(".")
        if dot and ext == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self) -> None:
        """Add a crate for every .rs file below ./exercises."""
        for path in sorted(glob.glob("exercises/**/*", recursive=True)):
            self._path_to_json(path)

    def get_sysroot_src(self) -> None:
        """Ask rustc for the default toolchain and derive the library sources path."""
        output = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True).stdout
        text = (output or b"").decode("utf-8", "replace")
        parts = text.split()
        toolchain = parts[0] if parts else text
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(Path(toolchain, "lib", "rustlib", "src", "rust", "library"))