import argparse
import os
import sys
from typing import List, Optional

from study_assistant import StudyAssistant, StudyAssistantError
from material import format_flashcards, format_key_concepts, render_markdown, save_materials
from logger import logger

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="study-assistant",
        description="Generate a summary, key concepts and flashcards from notes or documents.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?", help="A .txt, .md, .pdf or .docx file")
    source.add_argument("--text", help="Study text passed directly on the command line")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--concepts-only", action="store_true", help="Only extract key concepts")
    mode.add_argument("--flashcards-only", action="store_true", help="Only generate flashcards")

    parser.add_argument("--num-cards", type=int, default=10, help="Flashcards to request with --flashcards-only")
    parser.add_argument("--output", metavar="DIR", help="Save the full study materials as Markdown in DIR")
    return parser

def run(args: argparse.Namespace, assistant: StudyAssistant) -> str:
    """Execute one command and return the text to print."""
    if args.file:
        content = assistant.extract_text_from_file(args.file)
        title = os.path.splitext(os.path.basename(args.file))[0]
    else:
        content = args.text
        title = "Study Materials"

    if args.concepts_only:
        return format_key_concepts(assistant.extract_key_concepts(content).key_concepts)
    if args.flashcards_only:
        return format_flashcards(assistant.generate_flashcards(content, args.num_cards).flashcards)

    materials = assistant.generate_study_materials(content)
    if args.output:
        save_materials(materials, title, args.output)
    return render_markdown(materials, title)

def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.num_cards < 1:
        parser.error("--num-cards must be positive")

    logger.info("Starting Study Assistant")
    try:
        assistant = StudyAssistant()
        print(run(args, assistant))
    except StudyAssistantError as e:
        logger.error(f"Application error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"Could not read input: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
