import re

IDENTIFIER_CHARS = "A-Za-z0-9_"

PATTERNS = {
    # id, course_name, _private
    "PARAM_KEY": re.compile(r'[A-Za-z_][A-Za-z0-9_]*'),

    # :id, :course_name
    "PLACEHOLDER": re.compile(r':([A-Za-z_][A-Za-z0-9_]*)'),

    # Bad percent escape: %zz, trailing %
    "BAD_ESCAPE": re.compile(r'%(?![0-9A-Fa-f]{2})'),
}

def placeholder_pattern(key: str) -> "re.Pattern[str]":
    """
    Pattern for a single ':key' placeholder.
    The lookahead rejects a following identifier character, so ':id'
    never matches inside ':id_string'.
    """
    return re.compile(':' + re.escape(key) + '(?![' + IDENTIFIER_CHARS + '])')
