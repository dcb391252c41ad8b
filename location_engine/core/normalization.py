"""Text normalization utilities for location name matching."""
import re
import unicodedata


# Curly and modifier apostrophes all fold to the ASCII one
APOSTROPHE_VARIANTS = re.compile(r"[‘’‛ʼ′`]")

NON_ALPHANUMERIC = re.compile(r"[^a-z0-9\s]")
WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Normalize text for matching: unicode decompose, lowercase, strip punctuation, collapse whitespace.
    
    Combining marks left by NFKD decomposition are treated like any other
    punctuation, so "Mélanie" becomes "me lanie" while a trailing accent
    as in "Café" leaves just "cafe".
    
    Args:
        text: Input text string
        
    Returns:
        Normalized text string (lowercase ASCII letters, digits and single spaces)
    """
    if not text:
        return ""
    
    # Unicode compatibility decomposition
    text = unicodedata.normalize("NFKD", text)
    
    text = text.lower()
    text = APOSTROPHE_VARIANTS.sub("'", text)
    
    # Everything else that is not a letter, digit or space becomes a space
    text = NON_ALPHANUMERIC.sub(" ", text)
    
    text = WHITESPACE.sub(" ", text)
    
    return text.strip()
