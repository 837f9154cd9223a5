"""Local filesystem access: Markdown sources and exported pages."""

import logging
from pathlib import Path

from .exceptions import LocalIOError

logger = logging.getLogger(__name__)

EXPORT_TEMPLATE = """---
title: {title}
spaceKey: {space_key}
pageId: {page_id}
version: {version}
url: {url}
---

{body}
"""


def read_markdown_file(markdown_path: str) -> str:
    """Read a Markdown source file.

    Args:
        markdown_path: Path to the file, absolute or relative to the working directory

    Returns:
        The file content

    Raises:
        LocalIOError: If the file is missing or unreadable
    """
    try:
        with open(markdown_path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read Markdown file {markdown_path}: {e}")
        raise LocalIOError(f"Failed to read Markdown file '{markdown_path}': {e}") from e


def render_exported_page(
    title: str, space_key: str, page_id: str, version: int, url: str, body: str
) -> str:
    """Render an exported page: a front-matter header followed by the raw body."""
    return EXPORT_TEMPLATE.format(
        title=title,
        space_key=space_key,
        page_id=page_id,
        version=version,
        url=url,
        body=body,
    )


def get_export_path(output_path: str, page_id: str) -> str:
    """Return `<output_path>/<page_id>.md`, keeping the output path as given."""
    return f"{output_path}/{page_id}.md"


def save_exported_page(output_path: str, page_id: str, content: str) -> str:
    """Write an exported page to <output_path>/<page_id>.md.

    The output directory is created if needed. Existing files are overwritten.

    Args:
        output_path: Directory to write into
        page_id: ID of the exported page, used as the file name
        content: Rendered file content

    Returns:
        Path of the written file

    Raises:
        LocalIOError: If the directory cannot be created or the file written
    """
    filename = get_export_path(output_path, page_id)
    file_path = Path(filename)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the content byte-for-byte on every platform
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Failed to write {file_path}: {e}")
        raise LocalIOError(f"Failed to write '{file_path}': {e}") from e

    logger.debug(f"Saved page {page_id} to {file_path}")
    return filename
