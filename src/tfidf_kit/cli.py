from __future__ import annotations

# ruff: noqa: B008

import json
import logging
import math
import re
from typing import NoReturn

import typer

from src.core.settings import get_settings
from src.domain.documents import PairListDocument
from src.domain.schemes import IDF_SCHEMES, TF_SCHEMES, from_settings, normalize_scheme_name

from .exceptions import DocumentParseError, TfIdfError
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True, help="TF-IDF scoring tools")

_TOKEN_SPLIT_RE = re.compile(r"[\s,]+")


def parse_document(spec: str) -> PairListDocument:
    """Parse ``"a:3 b:2 c"`` into a document; a bare term counts once."""
    pairs: list[tuple[str, int]] = []
    for token in _TOKEN_SPLIT_RE.split(spec.strip()):
        if not token:
            continue
        term, sep, raw = token.rpartition(":")
        if not sep:
            term, raw = raw, "1"
        if not term:
            raise DocumentParseError(f"missing term in token {token!r}")
        try:
            n = int(raw)
        except ValueError:
            raise DocumentParseError(f"count in token {token!r} is not an integer") from None
        if n < 0:
            raise DocumentParseError(f"count in token {token!r} is negative")
        pairs.append((term, n))
    return PairListDocument(pairs)


def _fail(msg: str) -> NoReturn:
    typer.echo(f"error: {msg}", err=True)
    raise typer.Exit(code=2)


@app.command("schemes")
def schemes_cmd(
    as_json: bool = typer.Option(False, "--json", help="Print scheme names as JSON"),
) -> None:
    """List the available TF and IDF schemes."""
    tf_names = sorted(TF_SCHEMES)
    idf_names = sorted(IDF_SCHEMES)
    if as_json:
        typer.echo(json.dumps({"tf": tf_names, "idf": idf_names}))
        return
    typer.echo("TF schemes:")
    for name in tf_names:
        typer.echo(f"  {name}")
    typer.echo("IDF schemes:")
    for name in idf_names:
        typer.echo(f"  {name}")


@app.command("score")
def score_cmd(
    term: str = typer.Argument(..., help="Term to score"),
    doc: list[str] = typer.Option(
        ..., "--doc", "-d", help='Corpus document as "term:count" tokens; repeat per document'
    ),
    target: int = typer.Option(0, "--target", "-t", help="Index of the document to score"),
    tf: str | None = typer.Option(None, "--tf", help="TF scheme (default from settings)"),
    idf: str | None = typer.Option(None, "--idf", help="IDF scheme (default from settings)"),
    k: float | None = typer.Option(None, "--k", help="Factor for double_normalization"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Score TERM in one document against the corpus given with --doc."""
    try:
        settings = get_settings()
    except TfIdfError as e:
        _fail(str(e))
    setup_logging(settings.log_level_value)

    if not 0 <= target < len(doc):
        _fail(f"--target {target} out of range for {len(doc)} document(s)")

    overrides = {
        key: value
        for key, value in (("tf_scheme", tf), ("idf_scheme", idf), ("double_k", k))
        if value is not None
    }
    chosen = settings.model_copy(update=overrides)
    tf_name = normalize_scheme_name(chosen.tf_scheme)
    idf_name = normalize_scheme_name(chosen.idf_scheme)
    try:
        corpus = [parse_document(d) for d in doc]
        scorer = from_settings(chosen)
        value = scorer.tfidf(term, corpus[target], corpus)
    except (TfIdfError, ValueError) as e:
        _fail(str(e))

    logger.debug("score(%r, doc=%d) with %s = %r", term, target, scorer.name, value)
    finite = math.isfinite(value)
    if as_json:
        payload = {
            "term": term,
            "target": target,
            "tf": tf_name,
            "idf": idf_name,
            "score": value if finite else None,
            "finite": finite,
        }
        typer.echo(json.dumps(payload))
    else:
        typer.echo(repr(value))


if __name__ == "__main__":
    app()
