import re


DIRECT_URL_PATTERN = re.compile(r"https?://(www\.)?(youtube\.com|youtu\.be)/.+")


def is_direct_url(value: object) -> bool:
    if not isinstance(value, str):
        return False
    return DIRECT_URL_PATTERN.fullmatch(value) is not None
