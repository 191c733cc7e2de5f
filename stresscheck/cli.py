# stresscheck/cli.py
"""
CLI de la check de estrés.

  stresscheck interactive [--method sumup|conversion]
      Recorre el catálogo pregunta por pregunta y clasifica al final.
  stresscheck bulk ARCHIVO.csv [--method sumup|conversion]
      Puntúa cada registro `id,a1,...,a57`; los registros con error se registran y se saltan.
  stresscheck serve [--host H] [--port P]
      API FastAPI (igual que `uvicorn stresscheck.main:app`).
"""
import argparse
import csv
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv(usecwd=True))

from .core.config import settings
from .models.catalog import CatalogError, QuestionCatalog, load_catalog
from .services.answer_store import AnswerStore
from .services.bulk_reader import read_bulk
from .services.errors import IllegalAnswerError, StressCheckError
from .services.evaluation import evaluate
from .services.typing import Method
from .telemetry.logging import setup_logging

logger = logging.getLogger("stresscheck.cli")

RETRY_MESSAGE = "回答は半角数字1〜4で入力してください。"
HIGH_STRESS_MESSAGE = "あなたは高ストレス状態です。"
NO_STRESS_MESSAGE = "あなたは高ストレスではありません。"


def store_answer(value: str, store: AnswerStore) -> None:
    try:
        answer = int(value.strip())
    except ValueError:
        raise IllegalAnswerError(f"No es un número: {value!r}") from None
    store.push(answer)


def run_interactive(
    catalog: QuestionCatalog,
    method: Method = "sumup",
    read: Callable[[], str] | None = None,
    write: Callable[[str], None] = print,
) -> bool:
    """
    Hace las 57 preguntas en orden del catálogo y devuelve si hay 高ストレス.
    EOFError de `read` se propaga (entrada cerrada antes de terminar).
    """
    read = read or input
    store = AnswerStore()
    for theme in catalog.simple_stress:
        write(theme.theme)
        for block in theme.questions:
            if block.title:
                write(block.title)
            for question in block.questions:
                write(f"{question.id}. {question.text}")
                write("  ".join(f"{c.score} => {c.text}" for c in question.scores))
                while True:
                    try:
                        store_answer(read(), store)
                        break
                    except StressCheckError:
                        write(RETRY_MESSAGE)
                write("")

    result = evaluate(store, method)
    write(HIGH_STRESS_MESSAGE if result.high_stress else NO_STRESS_MESSAGE)
    write(f"A = {result.sum_a}, B = {result.sum_b}, C = {result.sum_c}")
    return result.high_stress


def run_bulk(path: Path, method: Method = "sumup", write: Callable[[str], None] = print) -> tuple[int, int]:
    """
    Devuelve (registros puntuados, registros con error).
    Bytes que no son UTF-8 se reemplazan: la celda afectada falla como IllegalAnswer y la corrida sigue.
    csv.Error (p. ej. campo demasiado largo) se propaga.
    """
    scored = failed = 0
    with path.open("r", encoding="utf-8", errors="replace", newline="") as f:
        for record in read_bulk(f):
            try:
                if not record.ok:
                    raise record.error
                result = evaluate(record.store, method)
            except StressCheckError as e:
                failed += 1
                logger.warning(f"línea {record.line_no} (id={record.identifier}): {e.code} {e}")
                continue
            scored += 1
            write(
                f"id = {record.identifier}, "
                f"scores = ({result.sum_a}, {result.sum_b}, {result.sum_c}), "
                f"has_stress = {str(result.high_stress).lower()}"
            )
    logger.info(f"bulk {path.name}: {scored} puntuados, {failed} con error")
    return scored, failed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stresscheck", description="職業性ストレス簡易調査票 (57項目) の採点")
    parser.add_argument("--catalog", type=Path, default=None, help="Catálogo JSON (default: CATALOG_PATH o el incluido)")
    parser.add_argument("--log-level", default=None, help="Nivel de logging (default: LOG_LEVEL)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_interactive = sub.add_parser("interactive", help="Responder las 57 preguntas por consola")
    p_interactive.add_argument("--method", choices=["sumup", "conversion"], default=settings.DEFAULT_METHOD)

    p_bulk = sub.add_parser("bulk", help="Puntuar un CSV id,a1,...,a57")
    p_bulk.add_argument("path", type=Path)
    p_bulk.add_argument("--method", choices=["sumup", "conversion"], default=settings.DEFAULT_METHOD)

    p_serve = sub.add_parser("serve", help="Levantar la API HTTP (uvicorn)")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "serve":
        import uvicorn
        uvicorn.run("stresscheck.main:app", host=args.host, port=args.port, log_level=settings.LOG_LEVEL.lower())
        return 0

    if args.command == "bulk":
        if not args.path.exists():
            logger.error(f"No existe el archivo: {args.path}")
            return 2
        try:
            run_bulk(args.path, args.method)
        except csv.Error as e:
            logger.error(f"CSV ilegible {args.path}: {e}")
            return 2
        return 0

    try:
        catalog = load_catalog(args.catalog or settings.CATALOG_PATH)
    except CatalogError as e:
        logger.error(str(e))
        return 2
    try:
        run_interactive(catalog, args.method)
    except (EOFError, KeyboardInterrupt):
        logger.warning("Entrada interrumpida antes de completar las 57 preguntas")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
