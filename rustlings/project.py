"""Generation of rust-project.json so rust-analyzer understands the exercises."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One exercise file treated as a standalone crate."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside test blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """The content of a rust-project.json file."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_json(self) -> str:
        data = {
            "sysroot_src": self.sysroot_src,
            "crates": [asdict(crate) for crate in self.crates],
        }
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    def write_to_disk(self, path: str | os.PathLike = "rust-project.json") -> None:
        Path(path).write_bytes(self.to_json().encode("utf-8"))

    def path_to_json(self, path: str) -> None:
        """Add a crate for the path if the text after its first dot is 'rs'."""
        _, dot, extension = path.partition(".")
        if dot and extension == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root: str | os.PathLike = "exercises") -> None:
        """Add a crate for every .rs file below the exercises directory."""
        for entry in sorted(Path(root).glob("**/*")):
            self.path_to_json(str(entry))

    def get_sysroot_src(self) -> None:
        """Ask rustc for the default toolchain and point at its library sources."""
        result = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True, check=False)
        output = (result.stdout or b"").decode("utf-8", errors="replace")
        words = output.split()
        toolchain = words[0] if words else output
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(Path(toolchain, "lib", "rustlib", "src", "rust", "library"))