"""Codegen configuration, read once from the environment."""

import os

# Root directory that the generated/<platform>/components trees are written under
CODEGEN_OUTPUT_DIR = os.getenv("CODEGEN_OUTPUT_DIR", os.getcwd())

# Prettier CLI used to canonicalize generated source
PRETTIER_BIN = os.getenv("PRETTIER_BIN", "prettier")
FORMAT_TIMEOUT = float(os.getenv("FORMAT_TIMEOUT", "20"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
