"""Common Utils - String Utilities."""
import re

from text_unidecode import unidecode


def slugify_name(text: str) -> str:
    """Generate URL-safe slug from a place name.

    Output depends only on the letters and digits of the input, so casing
    and surrounding or repeated whitespace never change the result.
    """
    if not text:
        return ''
    text = unidecode(text)
    text = text.replace('_', '-').replace('@', '-at-')
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[-_\s]+', '-', text)
    return text.strip('-')


def title_case(text: str) -> str:
    """Upper-case the first letter of each word, leaving the rest untouched."""
    if not text:
        return text
    return re.sub(r'(^|\s)(\S)', lambda m: m.group(1) + m.group(2).upper(), text)

