import re
import unicodedata


_NON_ALNUM = re.compile(r'[^a-z0-9]+')


def slugify(value: str) -> str:
    """
    'Grand Hall #2' -> 'grand-hall-2'

    Accents are folded to ASCII, everything that is not a letter or digit
    collapses into a single dash.
    """
    ascii_value = unicodedata.normalize('NFKD', value).encode('ascii', 'ignore').decode('ascii')
    return _NON_ALNUM.sub('-', ascii_value.lower()).strip('-') or 'venue'


def with_counter(base_slug: str, counter: int) -> str:
    return base_slug if counter == 0 else f'{base_slug}-{counter}'
