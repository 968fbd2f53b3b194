"""Punto de entrada de línea de comandos: MST de una lista de aristas en CSV."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from app.algorithms.errors import InvalidArgumentError, VertexIndexError
from app.algorithms.kruskal import kruskal_mst
from app.config import configure_logging, get_settings
from app.utils.graph_loader import infer_num_vertices, load_edges
from app.utils.rendering import format_report, render_result


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Árbol de expansión mínima (Kruskal) de un grafo en CSV.")
    parser.add_argument("edges", type=Path, help="CSV con columnas source,destination,weight")
    parser.add_argument(
        "--vertices",
        type=int,
        default=None,
        help="Número de vértices (por defecto: mayor índice usado + 1)",
    )
    parser.add_argument("--json", action="store_true", help="Imprimir el payload de dibujo en JSON")
    parser.add_argument(
        "--log-level",
        default=get_settings().log_level,
        help="Nivel de logging (default: MST_LOG_LEVEL o INFO)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.log_level)

    try:
        edges = load_edges(args.edges)
    except FileNotFoundError:
        print(f"ERROR: no se encontró el archivo '{args.edges}'.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    num_vertices = infer_num_vertices(edges) if args.vertices is None else args.vertices

    try:
        result = kruskal_mst(num_vertices, edges)
    except (InvalidArgumentError, VertexIndexError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.json:
        payload = render_result(num_vertices, edges, result, size=get_settings().canvas_size)
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(format_report(num_vertices, result))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
