"""Smart file writer that prints finished pages to the output directory."""

from pathlib import Path

from loguru import logger

from serialized_form.config import SERIALIZED_FORM_FILENAME
from serialized_form.core.tree.html import render_document_as_html
from serialized_form.models.node import DocumentNode


class FileWriter:
    """Write generated pages in a smart way.

    - Do not override files if contents are the same.
    - Refuse to write outside the output directory, or anything but HTML.

    Used as the printer of a PageAssembler. Errors from the filesystem are raised
    as OSError and left to the caller.
    """

    def __init__(
        self,
        outdir: str | Path,
        *,
        dry_run: bool = False,
        filename: str = SERIALIZED_FORM_FILENAME,
    ) -> None:
        self.outdir = str(Path(outdir).resolve())
        self.dry_run = dry_run
        self.filename = filename

        if not dry_run and not Path(self.outdir).is_dir():
            msg = f"Output directory {self.outdir!r} not found"
            raise ValueError(msg)

        logger.debug(f"Writer ready, outdir {outdir!r}, dry_run {dry_run!r}")
        # Absolute paths written this session.
        self._files_made: set[str] = set()
        # list of (action, filename) tuples
        self.updates: list[tuple[str, str]] = []

        self._num_same = 0
        self._num_changed = 0

    def is_possible_output(self, fname: str) -> bool:
        """Check if a file is a possible output file."""
        return fname.endswith(".html")

    def print_document(self, body: DocumentNode, *, title: str) -> None:
        """Render the page body as HTML and write it to the configured file."""
        self.make_page_file(self.filename, contents=render_document_as_html(body, title=title))

    def make_page_file(self, fname_rel: str, *, contents: str) -> str:
        """Write contents to a file relative to the output directory.

        Args:
            fname_rel: Path relative to output directory.
            contents: Text to write.

        Returns:
            The action taken: "create", "update" or "same".
        """
        if Path(fname_rel).is_absolute():
            msg = f"must be relative: {fname_rel!r}"
            raise ValueError(msg)

        fname = str(Path(self.outdir) / fname_rel)
        if not str(Path(fname).resolve()).startswith(self.outdir + "/"):
            msg = f"Path escapes outdir: {fname!r}"
            raise ValueError(msg)
        if not self.is_possible_output(fname):
            msg = f"Wanted to write {fname!r} but is_possible_output() returns False"
            raise ValueError(msg)

        self._files_made.add(fname)
        action = "create"
        try:
            with open(fname, encoding="utf-8") as f:
                if f.read() == contents:
                    self._num_same += 1
                    logger.debug(f"Unchanged: {fname!r}")
                    return "same"
            self._num_changed += 1
            action = "update"
        except (FileNotFoundError, UnicodeDecodeError):
            pass

        self.updates.append((action, fname))

        if self.dry_run:
            logger.info(f"dry-run: would {action} {fname!r}")
        else:
            logger.debug(f"Writing ({action}) {fname!r}")
            Path(fname).parent.mkdir(parents=True, exist_ok=True)
            with open(fname, "w", encoding="utf-8") as f:
                f.write(contents)
        return action

    def summary(self) -> str:
        """One-line statistics about files written this session."""
        return (
            f"Outputs: {self._num_same} same, {self._num_changed} changed, "
            f"{len(self._files_made) - self._num_same - self._num_changed} new"
        )
