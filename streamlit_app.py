import streamlit as st

from study_assistant import (
    EmptyContentError,
    ExtractionFailure,
    StudyAssistant,
    StudyAssistantError,
    UnsupportedFormat,
    encode_data_uri,
)
from material import format_flashcards, format_key_concepts, format_summary, render_markdown
from logger import logger

# --- Page Configuration ---
st.set_page_config(
    page_title="Study Assistant",
    page_icon="📚",
    layout="wide",
)

# --- Title and Description ---
st.title("📚 AI Study Assistant")
st.markdown("Paste your notes or upload a .txt, .pdf or .docx file to get a summary, key concepts and flashcards.")

# --- Session State Initialization ---
for key, default in (("assistant", None), ("input_text", ""), ("materials", None)):
    if key not in st.session_state:
        st.session_state[key] = default

# --- Helper Functions ---
def initialize_assistant():
    """Initializes the study assistant and stores it in the session state."""
    if st.session_state.assistant is None:
        try:
            st.session_state.assistant = StudyAssistant()
            logger.info("Study assistant initialized for Streamlit app.")
        except StudyAssistantError as e:
            st.error(f"Failed to initialize the study assistant: {e}")
            logger.error(f"Streamlit initialization failed: {e}")
            st.stop()

def handle_upload():
    """Extract text from the uploaded file into the input box."""
    uploaded = st.session_state.get("upload")
    if uploaded is None:
        return
    st.session_state.materials = None
    try:
        data_uri = encode_data_uri(uploaded.type or "", uploaded.getvalue())
        st.session_state.input_text = st.session_state.assistant.extract_text(data_uri)
    except UnsupportedFormat:
        st.session_state.upload_error = ("Unsupported File Type", "Please upload a .txt, .pdf or .docx file.")
    except ExtractionFailure as e:
        logger.error(f"File parsing error: {e}")
        st.session_state.upload_error = (
            "File Processing Error",
            "Failed to extract text from the file. It might be corrupted or protected.",
        )
    except StudyAssistantError as e:
        st.session_state.upload_error = ("File Processing Error", str(e))

# --- UI Components ---
initialize_assistant()

with st.sidebar:
    st.header("Upload a file")
    st.file_uploader("Upload notes", type=["txt", "pdf", "docx"], key="upload", on_change=handle_upload)
    upload_error = st.session_state.pop("upload_error", None)
    if upload_error:
        st.error(f"**{upload_error[0]}**: {upload_error[1]}")

st.text_area("Your study content", key="input_text", height=300,
             placeholder="Paste your lecture notes, an article, or any text here...")

if st.button("Generate", type="primary"):
    with st.spinner("Generating study materials..."):
        try:
            st.session_state.materials = st.session_state.assistant.generate_study_materials(
                st.session_state.input_text
            )
        except EmptyContentError:
            st.warning("Input is empty. Please paste text or upload a file.")
        except StudyAssistantError as e:
            logger.error(f"AI Generation Error: {e}")
            st.error("Failed to generate content. Please try again.")

materials = st.session_state.materials
if materials is not None:
    summary_col, concepts_col = st.columns(2)
    with summary_col:
        st.subheader("Summary")
        st.write(materials.summary)
        st.code(format_summary(materials), language=None)
    with concepts_col:
        st.subheader("Key Concepts")
        for concept in materials.key_concepts:
            st.markdown(f"- {concept}")
        st.code(format_key_concepts(materials.key_concepts), language=None)

    st.subheader("Flashcards")
    for i, card in enumerate(materials.flashcards, 1):
        with st.expander(f"{i}. {card.question}"):
            st.write(card.answer)
    st.code(format_flashcards(materials.flashcards), language=None)

    st.download_button(
        label="Download as Markdown",
        data=render_markdown(materials),
        file_name="study_materials.md",
        mime="text/markdown",
    )
