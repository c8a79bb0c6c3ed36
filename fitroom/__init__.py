"""fitroom: virtual model, garment try-on and pose variation images via Gemini.

Package layout:
    - `llm`: provider configuration and the injectable HTTP client.
    - `image`: data URL helpers, response interpretation, task functions.
    - `prompting`: fixed task prompts.
    - `catalog`: default wardrobe.
    - `api`: CLI and HTTP adapters.
"""

__version__ = "0.1.0"
