import os
import re
from typing import Iterable

from prompts import Flashcard, StudyMaterials
from logger import logger

def format_summary(materials: StudyMaterials) -> str:
    """Plain-text summary, ready for the clipboard."""
    return materials.summary.strip()

def format_key_concepts(concepts: Iterable[str]) -> str:
    """Key concepts as a single comma-separated line."""
    return ", ".join(c.strip() for c in concepts if c.strip())

def format_flashcards(flashcards: Iterable[Flashcard]) -> str:
    """Flashcards as 'Question:/Answer:' blocks separated by a blank line."""
    return "\n\n".join(
        f"Question: {card.question}\nAnswer: {card.answer}" for card in flashcards
    )

def _slugify(title: str) -> str:
    slug = re.sub(r'[^a-z0-9]+', '_', title.lower()).strip('_')
    return slug or "study"

def render_markdown(materials: StudyMaterials, title: str = "Study Materials") -> str:
    """
    Render study materials as a Markdown document.

    Args:
        materials: The generated study materials
        title: Heading for the document

    Returns:
        The Markdown text
    """
    lines = [f"# {title}", "", "## Summary", "", format_summary(materials), "", "## Key Concepts", ""]
    if materials.key_concepts:
        lines.extend(f"- {concept}" for concept in materials.key_concepts)
    else:
        lines.append("_No key concepts found._")

    lines.extend(["", "## Flashcards", ""])
    if materials.flashcards:
        for i, card in enumerate(materials.flashcards, 1):
            lines.append(f"**Q{i}. {card.question}**")
            lines.append("")
            lines.append(f"{card.answer}")
            lines.append("")
    else:
        lines.append("_No flashcards generated._")

    return "\n".join(lines).rstrip() + "\n"

def save_materials(materials: StudyMaterials, title: str, output_dir: str = "uploads") -> str:
    """
    Write study materials to ``<output_dir>/<title>_study_materials.md``.

    Returns:
        Path to the written file
    """
    os.makedirs(output_dir, exist_ok=True)
    file_path = os.path.join(output_dir, f"{_slugify(title)}_study_materials.md")

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(render_markdown(materials, title))

    logger.info(f"Study materials written to: {file_path}")
    return file_path
