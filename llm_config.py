# LLM Configuration
# Defaults for the hosted model backend. Environment variables of the same
# name (or a .env file) override every value here.

# Available providers: "gemini", "groq"
PROVIDER = "gemini"

# Model settings
MODEL_NAME = "gemini-2.5-flash"  # For Groq: "llama-3.3-70b-versatile", etc.

# API Keys (set these in your .env file)
# GEMINI_API_KEY=your_gemini_api_key_here
# GROQ_API_KEY=your_groq_api_key_here

# Generation settings
MAX_TOKENS = 2048
TEMPERATURE = 0.3

# Request policy: one attempt per user action, bounded by a timeout (seconds)
REQUEST_TIMEOUT = 60.0
MAX_RETRIES = 0
