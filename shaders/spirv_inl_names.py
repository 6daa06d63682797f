#!/usr/bin/env python3
"""Naming helpers for embedded shaders.

A shader filename such as ``shader.vert`` gets a camelCase variable name
(``shaderVert``) for the array holding its SPIR-V, and a snake_case stem
(``shader_vert``) for the generated ``.inl`` file.
"""

import re

# ASCII whitespace and NUL only; other Unicode spaces become separators.
STRIP_CHARS = " \t\n\v\f\r\0"
NON_WORD = re.compile(r"\W+", re.ASCII)
UNDERSCORE_WORD = re.compile(r"_(\w)", re.ASCII)
UNDERSCORES = re.compile(r"_+")
UPPERCASE = re.compile(r"[A-Z]+")


def to_variable_name(name):
    s = NON_WORD.sub("_", name.strip(STRIP_CHARS))
    s = UNDERSCORE_WORD.sub(lambda m: m.group(1).upper(), s)
    return UNDERSCORES.sub("", s)


def to_file_stem(name):
    """Snake case a camelCase name, e.g. shaderVert -> shader_vert.

    Every uppercase run gets an underscore in front of it, including one at
    the start of the name, so "ABC" comes out as "_abc".
    """
    s = NON_WORD.sub("_", name.strip(STRIP_CHARS))
    return UPPERCASE.sub(lambda m: "_" + m.group(0).lower(), s)
