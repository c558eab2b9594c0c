"""Baseline technology vocabulary for skill extraction.

Plain data: replace or localize this list without touching scoring code.
Entries are lower-case and matched as substrings of normalized text.
"""

BASELINE_SKILLS: tuple[str, ...] = (
    # Languages
    "javascript",
    "typescript",
    "python",
    "java",
    # Frameworks & runtimes
    "react",
    "next.js",
    "node.js",
    "express",
    # Data stores
    "sql",
    "postgresql",
    "mysql",
    "mongodb",
    "redis",
    # Infrastructure & cloud
    "docker",
    "kubernetes",
    "aws",
    "azure",
    "gcp",
    # APIs & web
    "graphql",
    "rest",
    "html",
    "css",
    "tailwind",
    # Testing
    "jest",
    "cypress",
    "playwright",
    # Tooling
    "git",
    "linux",
    # ML
    "machine learning",
    "pytorch",
    "tensorflow",
)
