# setup.py
from setuptools import setup, find_packages

setup(
    name="mal-lisp",
    version="0.1.0",
    description="A minimal Lisp interpreter: reader, evaluator, printer and REPL",
    packages=find_packages(include=["mal", "mal.*", "mal_lsp", "mal_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "mal=mal.__main__:main",
            "mal-ls=mal_lsp.server:main",
        ],
    },
    zip_safe=False,
)
