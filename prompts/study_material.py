from langchain_core.prompts import PromptTemplate
from langchain_core.output_parsers import PydanticOutputParser

from .models import StudyMaterials

def get_study_material_prompt():
    """Prompt for generating a summary, key concepts and flashcards in one call."""
    template = """You are an expert AI academic assistant. From the content provided below, please perform the following tasks:
1.  Generate a concise summary.
2.  Extract the most important key concepts as a list of strings.
3.  Create a set of flashcards (question and answer format) based on the key concepts.

Content: {content}

Return the results in the specified JSON format.
{format_instructions}
"""

    return PromptTemplate(
        template=template,
        input_variables=["content"],
        partial_variables={"format_instructions": PydanticOutputParser(pydantic_object=StudyMaterials).get_format_instructions()}
    )
