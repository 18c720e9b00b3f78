# src/difftok/config.py

DEFAULT_ENCODING = "o200k_base"

# Order matters: this is the order printed by --list.
SUPPORTED_ENCODINGS = [
    "o200k_base",
    "cl100k_base",
    "p50k_base",
    "p50k_edit",
    "r50k_base",
]

ENCODING_ALIASES = {
    "gpt2": "r50k_base",
}

GIT_EXECUTABLE = "git"
GIT_EXECUTABLE_ENV = "DIFFTOK_GIT"

# Zero context lines: the classifier never has to skip unchanged lines.
GIT_DIFF_ARGS = ["diff", "--no-ext-diff", "--unified=0"]
