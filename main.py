"""Lanzador de seedpass desde un checkout sin instalar.

Equivale al script `seedpass` que instala `pip install -e .`:

    python -m main generate --seed 7
    python -m main validate "SP!@khuz" --explain

Añade `src/` al `sys.path` (layout tipo "src") y delega en `cli.main.run`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
