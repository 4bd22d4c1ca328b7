"""Markdown parser for Obsidian notes."""

import logging

import frontmatter
import yaml

from vaultcal.models import Note
from vaultcal.vault.metadata import NoteMetadata

logger = logging.getLogger(__name__)


def parse_markdown(path: str, content: str) -> Note:
    """Parse a markdown file with frontmatter.

    Args:
        path: The note path, relative to the vault root.
        content: The raw markdown content.

    Returns:
        A Note with the front matter split from the body.

    Raises:
        yaml.YAMLError: the front matter is not valid YAML.
    """
    post = frontmatter.loads(content)
    return Note(path=path, content=post.content, frontmatter=dict(post.metadata))


def parse_note_metadata(path: str, content: str) -> NoteMetadata | None:
    """Return a note's front matter, or None when it has none.

    Malformed front matter is logged and treated as absent.
    """
    try:
        note = parse_markdown(path, content)
    except yaml.YAMLError as e:
        logger.warning("Malformed front matter in %s: %s", path, e)
        return None
    if not note.frontmatter:
        return None
    return NoteMetadata(note.frontmatter)
