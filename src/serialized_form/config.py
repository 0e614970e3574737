"""Configuration constants for serialized-form."""

from pathlib import Path

# Name of the generated page, relative to the output directory.
SERIALIZED_FORM_FILENAME: str = "serialized-form.html"

DEFAULT_TITLE: str = "Serialized Form"

# Heading levels on the page.
PAGE_TITLE_HEADING: int = 1
PACKAGE_HEADING: int = 2
CLASS_HEADING: int = 3
MEMBER_HEADING: int = 4

# Message keys looked up in the resource bundle.
MSG_IMPLEMENTS_SERIALIZABLE = "doclet.Class_0_implements_serializable"
MSG_EXTENDS_IMPLEMENTS_SERIALIZABLE = "doclet.Class_0_extends_implements_serializable"
MSG_PACKAGE = "doclet.Package"
MSG_SERIAL_VERSION_UID = "doclet.serialVersionUID"
MSG_SERIALIZED_FIELDS = "doclet.Serialized_Form_fields"
MSG_SERIALIZATION_METHODS = "doclet.Serialized_Form_methods"
MSG_WINDOW_TITLE = "doclet.Window_Title"

# English resource bundle. Placeholders are positional: {0}, {1}, ...
DEFAULT_MESSAGES: dict[str, str] = {
    MSG_IMPLEMENTS_SERIALIZABLE: "Class {0} implements Serializable",
    MSG_EXTENDS_IMPLEMENTS_SERIALIZABLE: "Class {0} extends {1} implements Serializable",
    MSG_PACKAGE: "Package",
    MSG_SERIAL_VERSION_UID: "serialVersionUID:",
    MSG_SERIALIZED_FIELDS: "Serialized Fields",
    MSG_SERIALIZATION_METHODS: "Serialization Methods",
    MSG_WINDOW_TITLE: "{0}",
    "doclet.navOverview": "Overview",
    "doclet.navPackage": "Package",
    "doclet.navClass": "Class",
    "doclet.navTree": "Tree",
    "doclet.navDeprecated": "Deprecated",
    "doclet.navIndex": "Index",
    "doclet.navHelp": "Help",
    "doclet.navSerializedForm": "Serialized Form",
}

# Navigation bar entries: (message key, target page). A None target marks the
# current page, which is shown highlighted instead of linked.
NAVIGATION_ENTRIES: list[tuple[str, str | None]] = [
    ("doclet.navOverview", "index.html"),
    ("doclet.navPackage", "package-summary.html"),
    ("doclet.navClass", "allclasses-index.html"),
    ("doclet.navTree", "overview-tree.html"),
    ("doclet.navDeprecated", "deprecated-list.html"),
    ("doclet.navIndex", "index-all.html"),
    ("doclet.navHelp", "help-doc.html"),
    ("doclet.navSerializedForm", None),
]

# Output directory candidates. First directory which exists is used.
OUTPUT_DIRECTORIES: list[Path] = [
    Path("build/docs/api"),
    Path("docs/api"),
]


def resolve_output_directory() -> Path:
    """Return the first existing output directory, or the current directory."""
    for candidate in OUTPUT_DIRECTORIES:
        if candidate.is_dir():
            return candidate
    return Path.cwd()
