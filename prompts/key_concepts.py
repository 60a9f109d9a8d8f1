from langchain_core.prompts import PromptTemplate
from langchain_core.output_parsers import PydanticOutputParser

from .models import KeyConcepts

def get_key_concepts_prompt():
    """Prompt for extracting the central ideas of a text."""
    template = """You are an expert academic assistant. Your task is to identify and extract the key concepts from the provided content.

Content: {content}

Extract the key concepts from the content above and return them as a list of strings. Focus on the most important and central ideas.
If the content has no identifiable concepts, return an empty list.
{format_instructions}
"""

    return PromptTemplate(
        template=template,
        input_variables=["content"],
        partial_variables={"format_instructions": PydanticOutputParser(pydantic_object=KeyConcepts).get_format_instructions()}
    )
