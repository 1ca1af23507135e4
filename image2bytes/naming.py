"""
Identifier derivation and file extension checks
"""

import os

GO_KEYWORDS = frozenset([
    "break", "case", "chan", "const", "continue", "default", "defer", "else",
    "fallthrough", "for", "func", "go", "goto", "if", "import", "interface",
    "map", "package", "range", "return", "select", "struct", "switch", "type", "var",
])


def title_case(s: str) -> str:
    """Capitalize the first letter of each word and join the words without separator

    Any character that is not a letter or digit acts as a word boundary,
    so "test_output" becomes "TestOutput".
    """
    # Replace separators with spaces, then split into words
    words = "".join(c if c.isalpha() or c.isdecimal() else " " for c in s).split()

    return "".join(_upper_first(word) for word in words)


def _upper_first(word: str) -> str:
    first = word[0].upper()
    # Keep letters whose upper case is more than one character ("\u00df" -> "SS")
    if len(first) != 1:
        first = word[0]
    return first + word[1:]


def variable_name_for(output_path: str) -> str:
    """Derive the Go variable name from the output file name"""
    stem = os.path.splitext(os.path.basename(output_path))[0]
    name = title_case(stem)

    # Go identifiers cannot be empty or start with a digit
    if not name or name[0].isdigit():
        name = "Image" + name
    return name


def is_go_identifier(name: str) -> bool:
    """Check if name is a valid Go identifier that is not a keyword"""
    if not name or name in GO_KEYWORDS:
        return False
    # Letter or underscore, then letters, digits or underscores
    if not (name[0].isalpha() or name[0] == "_"):
        return False
    return all(c.isalpha() or c.isdecimal() or c == "_" for c in name)


def is_png_file(path: str) -> bool:
    """Check if the path has a .png extension (case-insensitive)"""
    return path.lower().endswith(".png")


def is_go_file(path: str) -> bool:
    """Check if the path has a .go extension (case-insensitive)"""
    return path.lower().endswith(".go")
