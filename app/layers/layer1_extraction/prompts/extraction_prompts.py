"""Vision prompts for OCR-style text extraction."""

IMAGE_EXTRACTION_PROMPT = (
    "Extract all text from this image. Return only the raw text content, "
    "preserving line breaks and structure. Do not add any explanations or formatting."
)


PDF_EXTRACTION_PROMPT = (
    "Extract all text content from this PDF document. Return only the raw text content, "
    "preserving structure and line breaks. Do not add any explanations."
)
