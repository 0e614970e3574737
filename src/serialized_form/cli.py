"""CLI for serialized-form (render, outline)."""

from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from serialized_form.assembler import PageAssembler
from serialized_form.config import resolve_output_directory
from serialized_form.core.chrome import NavigationBar
from serialized_form.core.importer.manifest import Manifest, ManifestConfiguration, load_manifest
from serialized_form.core.links import RelativeLinkResolver
from serialized_form.core.tree.navigation import outline as tree_outline
from serialized_form.errors import SerializedFormError
from serialized_form.generator import generate_serialized_form
from serialized_form.logging_config import configure_logging
from serialized_form.messages import Messages
from serialized_form.models.node import DocumentNode
from serialized_form.protocols import PrinterProtocol
from serialized_form.writer import FileWriter

app = typer.Typer(help="Render the Serialized Form page of an API documentation set.")


class _NullPrinter:
    """Printer for commands that only inspect the finished tree."""

    def print_document(self, body: DocumentNode, *, title: str) -> None:
        logger.debug("Not printing {!r}", title)


def build_assembler(
    manifest: Manifest,
    messages: Messages,
    printer: PrinterProtocol,
    *,
    user_header: str | None = None,
    user_footer: str | None = None,
) -> PageAssembler:
    """Wire a PageAssembler with the default collaborators for a manifest."""
    return PageAssembler(
        ManifestConfiguration(manifest),
        links=RelativeLinkResolver(),
        navigation=NavigationBar(messages, user_header=user_header, user_footer=user_footer),
        messages=messages,
        printer=printer,
    )


def _load(manifest_path: Path) -> Manifest:
    if not manifest_path.exists():
        logger.error("Manifest not found: {}", manifest_path)
        raise typer.Exit(1)
    try:
        return load_manifest(manifest_path)
    except SerializedFormError as e:
        logger.error("Cannot read manifest: {}", e)
        raise typer.Exit(1) from e


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


@app.command()
def render(
    manifest_path: Path = typer.Argument(..., help="JSON manifest of serializable classes"),
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Documentation root to write into"),
    ] = None,
    dry_run: bool = typer.Option(False, "--dry-run", help="Do not write anything"),
    header: Annotated[
        str | None, typer.Option("--header", help="Text shown in the top navigation bar")
    ] = None,
    footer: Annotated[
        str | None, typer.Option("--footer", help="Text shown in the bottom navigation bar")
    ] = None,
) -> None:
    """Render serialized-form.html for a manifest."""
    manifest = _load(manifest_path)
    dst = output_dir or resolve_output_directory()

    try:
        writer = FileWriter(dst, dry_run=dry_run)
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    messages = Messages()
    assembler = build_assembler(
        manifest, messages, writer, user_header=header, user_footer=footer
    )
    try:
        stats = generate_serialized_form(assembler, manifest, messages)
    except SerializedFormError as e:
        logger.error("Page generation failed: {}", e)
        raise typer.Exit(1) from e

    logger.info(writer.summary())
    typer.echo(
        f"Rendered {stats.classes} classes in {stats.packages} packages "
        f"({stats.linked_classes} linked) to {Path(writer.outdir) / writer.filename}"
    )


@app.command()
def outline(
    manifest_path: Path = typer.Argument(..., help="JSON manifest of serializable classes"),
) -> None:
    """Print the heading outline of the page without writing it."""
    manifest = _load(manifest_path)
    messages = Messages()
    assembler = build_assembler(manifest, messages, _NullPrinter())
    try:
        generate_serialized_form(assembler, manifest, messages)
    except SerializedFormError as e:
        logger.error("Page generation failed: {}", e)
        raise typer.Exit(1) from e

    for entry in tree_outline(assembler.body):
        indent = "  " * max(entry.level - 1, 0)
        suffix = f"  #{entry.anchor}" if entry.anchor and entry.level > 2 else ""
        typer.echo(f"{indent}{entry.text}{suffix}")
