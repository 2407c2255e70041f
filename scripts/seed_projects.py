#!/usr/bin/env python3
"""
Cargar proyectos desde un archivo JSON, añadidos al final de la lista.

El archivo es una lista de objetos {"nombre", "codigo", "descripcion"?}.

Uso:
  python scripts/seed_projects.py proyectos.json [--dry-run]
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from projectboard.core.errors import ValidationError
from projectboard.db.create_tables import create_all
from projectboard.services.project_service import ProjectService


def load_entries(path: Path) -> list[dict]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise SystemExit("El JSON debe ser una lista de proyectos")
    return [item for item in data if isinstance(item, dict)]


def main() -> None:
    ap = argparse.ArgumentParser(description="Cargar proyectos desde JSON")
    ap.add_argument("file", type=Path, help="Archivo JSON con la lista de proyectos")
    ap.add_argument("--dry-run", action="store_true", help="Solo validar, no escribir")
    args = ap.parse_args()

    entries = load_entries(args.file)
    create_all()
    service = ProjectService()
    created = skipped = 0
    for entry in entries:
        nombre = (entry.get("nombre") or "").strip()
        codigo = (entry.get("codigo") or "").strip()
        if not nombre or not codigo:
            print(f"  omitido (faltan campos): {entry}")
            skipped += 1
            continue
        if args.dry_run:
            print(f"  [dry-run] {codigo} - {nombre}")
            continue
        try:
            project = service.create_project(nombre, codigo, entry.get("descripcion"))
        except ValidationError as exc:
            print(f"  omitido ({exc.message}): {entry}")
            skipped += 1
            continue
        print(f"  OK {project.orden:>3}  {project.codigo} - {project.nombre}")
        created += 1
    print(f"Creados: {created}  Omitidos: {skipped}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
