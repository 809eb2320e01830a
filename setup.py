# setup.py
from setuptools import setup, find_packages

setup(
    name="lumen",
    version="0.3.0",
    description="A small Lisp-style language with a tree-walking evaluator",
    packages=find_packages(include=["lumen", "lumen.*", "lumen_lsp", "lumen_lsp.*"]),
    package_data={"lumen": ["prelude/*.lisp"]},
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
            "lumen = lumen.repl:main",
            "lumen-ls = lumen_lsp.server:main",
        ],
    },
    zip_safe=False,
)
