from langchain_core.prompts import PromptTemplate
from langchain_core.output_parsers import PydanticOutputParser

from .models import Flashcards

def get_flashcards_prompt():
    """Prompt for turning study content into question/answer flashcards."""
    template = """You are an expert academic assistant who writes flashcards for revision.

Content: {content}

Create about {num_cards} flashcards from the content above.
- Each question should test exactly one idea from the content.
- Keep answers short and self-contained.
- Do not invent facts that are not supported by the content.
{format_instructions}
"""

    return PromptTemplate(
        template=template,
        input_variables=["content", "num_cards"],
        partial_variables={"format_instructions": PydanticOutputParser(pydantic_object=Flashcards).get_format_instructions()}
    )
