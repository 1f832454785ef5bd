from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to the classification tables (relevant, asset and
binary extension sets), noise directory names, rendering constants and the
LLM helper header shown above text trees.
"""

from typing import FrozenSet, Tuple

INDENT_SPACES = 5

MODE_GIT = "git-aware"
MODE_FS = "fs-heuristic"

HEADER_TITLE = "# Tree for AI"
HEADER_RULES: Tuple[str, ...] = (
    "- Work only with files/paths listed below unless explicitly asked to create new ones.",
    "- All paths are relative to the root above.",
    "- File contents are not included; ask if more context is needed.",
)

# -----------------------------------------------------------------------------
# SECRET DETECTION
# -----------------------------------------------------------------------------

SECRET_NAME_PATTERN = r"(?:^|[^a-z])secrets?(?:$|[^a-z])"

# -----------------------------------------------------------------------------
# NOISE DIRECTORIES (always pruned from the filesystem walk)
# -----------------------------------------------------------------------------

NOISE_DIRS: FrozenSet[str] = frozenset({
    ".git", ".hg", ".svn",
    "__pycache__", ".cache", ".mypy_cache", ".pytest_cache", ".ruff_cache", ".tox",
    ".venv", "venv", "env",
    "node_modules", ".pnpm-store",
    "dist", "build", "out", "target", "bin", "obj",
    ".next", ".nuxt", ".angular", ".parcel-cache", ".docusaurus",
    ".gradle", ".idea", ".vscode", ".terraform", ".serverless",
})

# -----------------------------------------------------------------------------
# CLASSIFICATION TABLES
# -----------------------------------------------------------------------------

JUNK_NAMES: FrozenSet[str] = frozenset({".ds_store", "thumbs.db"})

LOCK_NAMES: FrozenSet[str] = frozenset({
    "yarn.lock", "package-lock.json", "pnpm-lock.yaml", "pipfile.lock", "poetry.lock",
})

RELEVANT_NAMES: FrozenSet[str] = frozenset({
    "dockerfile", "dockerfile.dev", "makefile", "gnumakefile", "cmakelists.txt",
    "license", "changelog", "readme", "gemfile", "procfile", "jenkinsfile", "vagrantfile",
    ".dockerignore", ".editorconfig", ".gitignore", ".gitattributes",
    ".eslintignore", ".prettierignore", ".npmrc", ".nvmrc",
})

RELEVANT_EXTENSIONS: FrozenSet[str] = frozenset({
    # docs/config
    "md", "markdown", "rst", "adoc", "txt",
    "json", "jsonc", "yaml", "yml", "toml", "ini", "cfg", "conf", "env", "properties", "xml", "csv",
    # web
    "html", "htm", "css", "scss", "less", "vue", "svelte",
    # code
    "rs", "py", "pyi", "ipynb",
    "js", "cjs", "mjs", "jsx", "ts", "tsx",
    "sh", "bash", "zsh", "ps1", "bat", "cmd",
    "go", "mod", "java", "kt", "kts", "dart",
    "c", "h", "cpp", "hpp", "cc", "hh",
    "cs", "vb", "php", "rb", "swift", "scala", "erl", "ex", "exs", "lua", "r",
    "sql", "prisma", "graphql", "gql", "proto",
    "gradle", "groovy", "tf", "sln", "csproj", "fsproj", "vbproj", "vcxproj",
    "editorconfig", "gitattributes", "gitignore", "eslintignore", "prettierignore", "dockerignore",
})

ASSET_EXTENSIONS: FrozenSet[str] = frozenset({
    "png", "jpg", "jpeg", "gif", "svg", "webp", "ico", "bmp", "tiff",
    "mp3", "wav", "flac", "ogg", "mp4", "mov", "mkv", "avi", "webm",
    "woff", "woff2", "eot", "ttf", "otf",
    "pdf",
})

BINARY_EXTENSIONS: FrozenSet[str] = frozenset({
    "zip", "tar", "gz", "tgz", "bz2", "xz", "7z", "rar",
    "o", "a", "obj", "lib", "so", "dylib", "dll", "exe", "bin", "wasm",
    "class", "jar", "war", "pyc", "pyo", "whl",
    "db", "sqlite", "sqlite3", "pkl", "npy", "npz", "parquet",
})
