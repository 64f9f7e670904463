import PyPDF2
import re
import logging

logger = logging.getLogger(__name__)

class PDFProcessor:
    def __init__(self):
        # Punctuation is left alone so keyword matching sees the same tokens as plain text input
        self.text_cleaning_patterns = [
            (r'[ \t\r\f\v]+', ' '),  # Runs of spaces to single space
            (r'\n+', '\n'),  # Multiple newlines to single newline
            (r'[\x00-\x08\x0e-\x1f\x7f]', ''),  # Remove control characters
        ]

    def extract_text(self, file_path: str) -> str:
        """
        Extract text from PDF file
        """
        try:
            with open(file_path, 'rb') as file:
                pdf_reader = PyPDF2.PdfReader(file)
                pages = []

                for page in pdf_reader.pages:
                    pages.append(page.extract_text() or "")

                # Clean extracted text
                cleaned_text = self.clean_text("\n".join(pages))
                logger.info(f"Extracted {len(cleaned_text)} characters from {len(pages)} page(s)")

                return cleaned_text

        except Exception as e:
            logger.error(f"Error extracting text from PDF: {str(e)}")
            return ""

    def clean_text(self, text: str) -> str:
        """
        Clean and normalize extracted text
        """
        for pattern, replacement in self.text_cleaning_patterns:
            text = re.sub(pattern, replacement, text)

        return text.strip()
