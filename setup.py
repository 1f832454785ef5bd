# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="tree4ai",
    version="1.0.0",
    description="LLM-friendly project tree: filtered, depth-bounded listings of a project's paths",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["tree4ai", "tree4ai.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pathspec>=0.12",  # .gitignore evaluation during the filesystem walk
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'tree4ai=tree4ai.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
