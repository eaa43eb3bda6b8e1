"""`python -m main` desde dentro de `src/`.

Los comandos `generate` y `validate` imprimen contraseñas y candidatos con
símbolos (`!@#$%^&*...`); en Windows se fuerza UTF-8 en stdout/stderr para
que Rich y `typer.echo` no fallen con cp1252.
"""

from __future__ import annotations

import sys

if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
