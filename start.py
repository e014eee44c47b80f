"""Simple launcher for the itinerary viewer.

Starts the Gradio app with the project's virtualenv interpreter when
there is one, so the viewer runs with its own dependencies.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent

    script_path = project_root / "apps" / "app.py"
    if not script_path.exists():
        print(f"Cannot find {script_path.relative_to(project_root)}.")
        sys.exit(1)

    venv_python = project_root / ".venv" / "bin" / "python"
    if not venv_python.exists():
        venv_python = project_root / ".venv" / "Scripts" / "python.exe"

    python_exe = str(venv_python) if venv_python.exists() else sys.executable
    cmd = [python_exe, str(script_path)]
    print(f"Starting apps/app.py with: {' '.join(cmd)}")
    subprocess.run(cmd, check=False, cwd=project_root)


if __name__ == "__main__":
    main()
